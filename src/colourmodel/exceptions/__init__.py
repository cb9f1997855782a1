"""
Custom exception hierarchy for colourmodel.

## Exception Hierarchy

```
ColourModelError (base)
├── ColourError (also a ValueError)
│   ├── InvalidFormatError
│   └── InvalidArgumentError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `ColourModelError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Malformed HEX

```python
from colourmodel import ColourModel
from colourmodel.exceptions import InvalidFormatError

try:
    ColourModel("#12345")
except InvalidFormatError as e:
    print(e.get_full_message())
```

See `colourmodel.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import ColourModelError
from .colour import ColourError, InvalidArgumentError, InvalidFormatError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
    wrap_validation_error,
)

__all__ = [
    # Base
    "ColourModelError",
    # Colour
    "ColourError",
    "InvalidArgumentError",
    "InvalidFormatError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorCollector",
    "ErrorContext",
    "collect_errors",
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
    "wrap_validation_error",
]
