"""SmartGate dashboard: submit datasets to SmartGate and chart the returned statistics"""

__version__ = "1.0.0"
