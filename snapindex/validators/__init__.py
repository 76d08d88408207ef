"""Schema validation for snapindex options"""
from snapindex.validators.options import get_schema, validate_options
