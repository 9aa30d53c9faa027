"""Built-in CLI sub-commands for apisample.

* :mod:`~apisample.commands.operations` -- ``search``, ``sample`` and
  ``tools``, registered directly on the root app.
* :mod:`~apisample.commands.config` -- the ``config`` sub-command group for
  viewing and modifying global settings.
"""
