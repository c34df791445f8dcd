class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class InvalidArgumentException(DomainException):
    """引数が欠落している、または許容されない値の場合

    状態を変更する前に送出されるため、送出時点で既存の状態は変わらない。
    """

    pass
