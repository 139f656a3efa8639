from __future__ import annotations

from pydantic_core import CoreSchema, core_schema
from pydantic.json_schema import JsonSchemaValue
from pydantic import GetJsonSchemaHandler


__all__ = ('Snowflake',)


class Snowflake(int):
    """a 64-bit discord id, sent over the wire as a string"""

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: type[Snowflake] | None,
        _handler: GetJsonSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.int_schema(ge=0, lt=1 << 64),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda x: str(int(x)),
                return_schema=core_schema.str_schema(),
            )
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'string', 'format': 'snowflake'}

    def __repr__(self) -> str:
        return f'Snowflake({int(self)})'
