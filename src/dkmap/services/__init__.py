"""Service layer: validate and apply mappings, returning ServiceResult."""
