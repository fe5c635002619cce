from atimport.engine.emission import IMPORT_NAME_TEMPLATE, emit_records
from atimport.engine.orchestrator import ResolutionOrchestrator
from atimport.engine.processor import ImportParser, parse_imports

__all__ = [
    "IMPORT_NAME_TEMPLATE",
    "emit_records",
    "ResolutionOrchestrator",
    "ImportParser",
    "parse_imports",
]
