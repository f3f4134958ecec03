"""
Laravel-style attribute handling for plain Python records.

Classes:
- Model: base record with mass assignment protection, mutators, change
  tracking and hidden/visible serialization
- JsonOption: flags for Model.to_json()
- MassAssignmentException: raised when a totally guarded model is filled

Examples:
    class User(Model):
        __fillable__ = ['name', 'email']
        __hidden__ = ['password']

    user = User({'name': 'Aidan', 'email': 'aidan@example.com'})
    user.password = 'secret'
    user.to_json()  # '{"name":"Aidan","email":"aidan@example.com"}'
"""

from __future__ import annotations

from .Exceptions import MassAssignmentException
from .Models import JsonOption, Model

__all__ = [
    "JsonOption",
    "MassAssignmentException",
    "Model"
]
