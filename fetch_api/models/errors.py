class InvalidTrailingSlashError(ValueError):
    def __init__(self, value: object) -> None:
        self.value = value
        self.message = (
            f"Invalid trailing slash policy {value!r}. "
            "Expected one of 'always', 'none', 'write_only'."
        )
        super().__init__(self.message)
