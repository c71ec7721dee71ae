"""extend-kit: Extension management for host applications.

Import from submodules:
- version: __version__
- package_manager: PackageManager (reconciliation and action dispatch)
- context: ExtendContext, create_context
"""

from extend_kit.version import __version__ as __version__
