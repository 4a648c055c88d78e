"""Config loading and event output for the capacity simulator."""
