from dataclasses import dataclass

# widest mask that still fits a signed 64-bit integer (and a numpy int64 array)
DEFAULT_MAX_WIDTH = 63

OUTPUT_FORMATS = ('list', 'json', 'table')
ITEM_TYPES = {'str': str, 'int': int, 'float': float}


@dataclass
class EnumeratorConfig:
    max_width: int = DEFAULT_MAX_WIDTH
    output_format: str = 'list'
    item_type: str = 'str'

    def __post_init__(self):
        if self.max_width < 0: raise ValueError("max_width must be non-negative")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"unknown output format '{self.output_format}', expected one of {OUTPUT_FORMATS}")
        if self.item_type not in ITEM_TYPES:
            raise ValueError(f"unknown item type '{self.item_type}', expected one of {tuple(ITEM_TYPES)}")

    def convert(self, raw: str):
        """convert a raw command-line item to the configured type"""
        return ITEM_TYPES[self.item_type](raw)
