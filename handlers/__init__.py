"""
handlers/ - Console Interaction Layer
=====================================
Reads user input from the console and delegates all logic to the service layer.
"""
