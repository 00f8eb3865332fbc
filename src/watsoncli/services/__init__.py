"""Service descriptor modules, one per remote service.

Each module exports ``SERVICE``, a :class:`~watsoncli.models.ServiceSpec`
holding that service's operation table. :mod:`watsoncli.services.registry`
collects and validates them.
"""
