"""Built-in authenticator plugins.

Each subpackage provides one :class:`~watsoncli.auth.base.AuthPlugin`
implementation, registered by
:func:`~watsoncli.auth.manager.create_default_manager`:

* :mod:`~watsoncli.plugins.iam` -- ``iam``
* :mod:`~watsoncli.plugins.basic` -- ``basic``
* :mod:`~watsoncli.plugins.bearer` -- ``bearerToken``
* :mod:`~watsoncli.plugins.noauth` -- ``noAuth``
* :mod:`~watsoncli.plugins.cp4d` -- ``cp4d``
"""
