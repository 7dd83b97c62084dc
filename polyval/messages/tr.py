"""Turkish messages."""

MESSAGES = {
    "required": "Bu alan zorunludur",
    "invalid_type": "Geçersiz tip",
    "string": {
        "min": lambda n: f"En az {n} karakter uzunluğunda olmalıdır",
        "max": lambda n: f"En fazla {n} karakter uzunluğunda olmalıdır",
        "length": lambda n: f"Tam olarak {n} karakter uzunluğunda olmalıdır",
        "email": "Geçersiz e-posta adresi",
        "url": "Geçersiz URL",
        "uuid": "Geçersiz UUID",
        "cuid": "Geçersiz CUID",
        "datetime": "Geçersiz tarih/saat formatı",
        "ip": "Geçersiz IP adresi",
        "regex": "Geçersiz format",
        "starts_with": lambda prefix: f'"{prefix}" ile başlamalıdır',
        "ends_with": lambda suffix: f'"{suffix}" ile bitmelidir',
        "numeric": "Sadece sayısal karakterler içermelidir",
    },
    "number": {
        "min": lambda n: f"En az {n} olmalıdır",
        "max": lambda n: f"En fazla {n} olmalıdır",
    },
    "date": {
        "min": lambda date: f"{date:%d.%m.%Y} tarihinden sonra olmalıdır",
        "max": lambda date: f"{date:%d.%m.%Y} tarihinden önce olmalıdır",
    },
    "boolean": {
        "true": "İşaretli olmalıdır",
        "false": "İşaretli olmamalıdır",
    },
    "equals": lambda field: f"{field} alanı ile eşleşmelidir",
    "not_equals": lambda field: f"{field} alanı ile eşleşmemelidir",
}
