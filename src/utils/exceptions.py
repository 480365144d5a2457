class PromptFormatError(Exception):
    """Base exception for the prompt format converter."""


class ValidationError(PromptFormatError):
    pass


class FormatExistsError(PromptFormatError):
    def __init__(self, name: str):
        self.name = name
        super().__init__("This format name already exists.")


class FormatNotFoundError(PromptFormatError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Format not found: {name}")


class SessionNotFoundError(PromptFormatError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class LLMError(PromptFormatError):
    def __init__(self, provider: str, detail: str):
        self.provider = provider
        self.detail = detail
        super().__init__(f"LLM error ({provider}): {detail}")


class PreferenceStoreError(PromptFormatError):
    pass
