"""
Custom exceptions for HoYoWiki page normalization.

Fetch failures, bad configuration and upstream contract violations each get
their own type so the calling layer can map them to distinct responses.
"""


class HoYoWikiError(Exception):
    pass


class WikiError(HoYoWikiError):
    pass


class ConfigError(HoYoWikiError):
    pass


class MalformedInput(HoYoWikiError):
    pass


class MalformedPayload(HoYoWikiError):
    def __init__(self, module_name: str, reason: str):
        self.module_name = module_name
        self.reason = reason
        super().__init__(f"Module '{module_name}' has an unparseable embedded payload: {reason}")


class UnknownGameFamily(HoYoWikiError):
    def __init__(self, family: str):
        self.family = family
        super().__init__(f"Unsupported game family '{family}'. Expected one of: genshin, hsr")
