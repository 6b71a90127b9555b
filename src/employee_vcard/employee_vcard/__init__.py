"""Employee vCard package.

Organized by feature modules (employees, common, core) with a thin Flask
controller layer on top of service/repository layers.
"""
