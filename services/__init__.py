# services/__init__.py

# This file makes the 'services' directory a Python package and
# exposes its modules for import.

from . import product_client
from . import ui_state
from . import product_ui
