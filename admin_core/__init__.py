"""admin-core: master codes, business code allocation, roles, and authorization.

Entry point for host applications: admin_core.core.composition.CoreServices.
"""

__version__ = "1.0.0"
