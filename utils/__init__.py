"""
==========================
Utility Functions Package.
==========================

Helpers for handing generated SQL to SQLAlchemy.

Modules:
    statement_utils: TextClause wrapping, bind parameter checks and execution
"""

__version__ = "0.3.0"
__all__ = [
    'to_text',
    'required_parameters',
    'missing_parameters',
    'execute_statement'
]

from .statement_utils import (
    execute_statement,
    missing_parameters,
    required_parameters,
    to_text,
)
