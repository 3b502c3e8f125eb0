"""NiceGUI presentation layer for the lending client."""
