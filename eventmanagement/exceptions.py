class InvalidEnumValue(ValueError):
    """Raised when a value outside of a closed enumeration is assigned."""

    def __init__(self, value, enum_name: str = ""):
        self.value = value
        self.enum_name = enum_name
        target = f" for {enum_name}" if enum_name else ""
        super().__init__(f"Invalid enum value{target}: {value!r}")
