from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    TAG = auto()
    ENDTAG = auto()
    TEXT = auto()
    ATTRIBUTE = auto()
    ANNOTATION = auto()

    @classmethod
    def structural(cls):
        """
        The kinds the tree builder acts upon, ie. everything
        but annotations.
        """
        return (
            cls.TAG,
            cls.ENDTAG,
            cls.TEXT,
            cls.ATTRIBUTE,
        )
