"""
Boolean Postfix Test Suite
File: tests/__init__.py

Test modules for expression tokenizing and postfix conversion.
"""

__all__ = [
    'test_lexer',
    'test_postfix',
    'test_pipeline',
    'test_expression_file',
    'test_cli',
    'run_tests'
]
