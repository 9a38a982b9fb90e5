"""Static schema of the benchmarked user entity.

The same declaration drives the SQLAlchemy table and the DianaDB model schema.
"""
from collections import namedtuple
from datetime import date, datetime

from sqlalchemy import JSON, Column, Date, Integer, MetaData, String, Table
from sqlalchemy.orm import registry

FieldSpec = namedtuple("FieldSpec", ["name", "type", "required", "items"])

STRING = "string"
TIME = "time"
ARRAY = "array"

USER_SCHEMA = (
    FieldSpec("name", STRING, True, None),
    FieldSpec("sex", STRING, True, None),
    FieldSpec("birthday", TIME, False, None),
    FieldSpec("tags", ARRAY, False, STRING),
)

_SQL_TYPES = {
    STRING: lambda: String(64),
    TIME: Date,
    # MySQL has no array column
    ARRAY: JSON,
}

metadata = MetaData()


def users_table(meta, schema=USER_SCHEMA):
    columns = [Column("id", Integer, primary_key=True, autoincrement=True)]
    for field in schema:
        columns.append(Column(field.name, _SQL_TYPES[field.type](), nullable=not field.required))
    return Table("users", meta, *columns)


def diana_schema(types, schema=USER_SCHEMA):
    """Render the schema with the DianaDB driver's ``Types`` namespace."""
    rendered = {}
    for field in schema:
        entry = {"type": getattr(types, field.type.upper())}
        if field.required:
            entry["required"] = True
        if field.items:
            entry["items"] = getattr(types, field.items.upper())
        rendered[field.name] = entry
    return rendered


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value).date()


class User:
    def __init__(self, name, sex, birthday, tags):
        self.name = name
        self.sex = sex
        self.birthday = birthday
        self.tags = tags

    @classmethod
    def from_record(cls, record):
        return cls(record.name, record.sex, _as_date(record.birthday), list(record.tags))

    def __repr__(self):
        return f"User(id={getattr(self, 'id', None)!r}, name={self.name!r})"


user_table = users_table(metadata)
mapper_registry = registry(metadata=metadata)
mapper_registry.map_imperatively(User, user_table)
