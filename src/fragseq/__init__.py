# Re-export the core types and the thin-wrapper module so callers can
# from fragseq import Fragment, Assembler, pipeline
from importlib import import_module as _imp

from fragseq.assembly import Assembler, Fragment, InvalidAlphabetError

pipeline = _imp('.pipeline', __name__) # noqa: F401

__all__ = ['Assembler', 'Fragment', 'InvalidAlphabetError', 'pipeline']

__version__ = "0.1.0"
