from enum import Enum


class ListConvertableEnum(Enum):
    @classmethod
    def get_values(cls) -> list[str]:
        return list(map(lambda field: field.value, cls))

    @classmethod
    def from_value(cls, value: str) -> "ListConvertableEnum":
        try:
            return cls(value)
        except ValueError as error:
            raise ValueError(f"Unknown {cls.__name__} value '{value}'. Allowed: {cls.get_values()}") from error
