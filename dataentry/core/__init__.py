"""
Core utilities shared across the data entry app.

Configuration, logging setup and the error hierarchy live here so that the
gateway, controller and routers do not read os.environ or configure handlers
themselves.
"""
