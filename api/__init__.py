"""
SmartDrive Routing HTTP API.
"""
