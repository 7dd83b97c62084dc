"""English messages."""

MESSAGES = {
    "required": "This field is required",
    "invalid_type": "Invalid type",
    "string": {
        "min": lambda n: f"Must be at least {n} characters long",
        "max": lambda n: f"Must not exceed {n} characters",
        "length": lambda n: f"Must be exactly {n} characters long",
        "email": "Invalid email address",
        "url": "Invalid URL",
        "uuid": "Invalid UUID",
        "cuid": "Invalid CUID",
        "datetime": "Invalid datetime format",
        "ip": "Invalid IP address",
        "regex": "Invalid format",
        "starts_with": lambda prefix: f'Must start with "{prefix}"',
        "ends_with": lambda suffix: f'Must end with "{suffix}"',
        "numeric": "Must contain only numeric characters",
    },
    "number": {
        "min": lambda n: f"Must be at least {n}",
        "max": lambda n: f"Must not exceed {n}",
    },
    "date": {
        "min": lambda date: f"Must be after {date:%Y-%m-%d}",
        "max": lambda date: f"Must be before {date:%Y-%m-%d}",
    },
    "boolean": {
        "true": "Must be checked",
        "false": "Must be unchecked",
    },
    "equals": lambda field: f"Must match the {field} field",
    "not_equals": lambda field: f"Must not match the {field} field",
}
