"""Employee Directory package.

Organized by feature modules (employees, credentials, auth) with a thin Flask
controller layer over service and repository layers.
"""
