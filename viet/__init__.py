# Viet language package
# This package provides a lexer, parser and tree-walking interpreter for Viet,
# a small imperative language with Vietnamese keywords.
from .errors import ErrorInfo, VietError, VietSyntaxError, VietRuntimeError
from .interpreter import run, run_file, Interpreter, RunResult
from .lexer import tokenize
from .parser import parse, parse_program

__all__ = [
    'run',
    'run_file',
    'tokenize',
    'parse',
    'parse_program',
    'Interpreter',
    'RunResult',
    'ErrorInfo',
    'VietError',
    'VietSyntaxError',
    'VietRuntimeError',
]
