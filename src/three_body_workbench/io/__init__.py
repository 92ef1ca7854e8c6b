from .scenario_format import (
    SCENARIO_SCHEMA_VERSION,
    ScenarioDocument,
    deserialize_document,
    document_from_dict,
    document_to_dict,
    load_document,
    save_document,
    serialize_document,
)

__all__ = [
    "SCENARIO_SCHEMA_VERSION",
    "ScenarioDocument",
    "deserialize_document",
    "document_from_dict",
    "document_to_dict",
    "load_document",
    "save_document",
    "serialize_document",
]
