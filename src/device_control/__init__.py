"""Device Control - simulated household devices behind one on/off interface."""

__version__ = "1.0.0"
