from .context import CURRENT_TEST, case_scope, current_test

__all__ = [
    "CURRENT_TEST",
    "case_scope",
    "current_test",
]
