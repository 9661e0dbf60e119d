"""
Contains some useful utility functions around member accessors.
"""
from .member import get_member_name, get_member_path, required_field
