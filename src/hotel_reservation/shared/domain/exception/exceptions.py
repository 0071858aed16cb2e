class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException, ValueError):
    """エンティティ・値オブジェクトの生成時に入力値が不正な場合"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class CustomerNotFoundException(ResourceNotFoundException):
    """メールアドレスに該当する顧客が登録されていない場合"""

    def __init__(self, email: str) -> None:
        super().__init__(f"Customer not found: {email}")
        self.email = email


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class RoomUnavailableException(BusinessRuleViolationException):
    """指定期間に重なる予約が既に存在する場合"""

    def __init__(self, room_number: str, check_in: object, check_out: object) -> None:
        super().__init__(
            f"Room {room_number} is not available from {check_in} to {check_out}"
        )
        self.room_number = room_number


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class DuplicateCustomerEmailException(DuplicateResourceException):
    """同じメールアドレスの顧客が既に存在する場合"""

    def __init__(self, email: str) -> None:
        super().__init__(f"Customer already exists: {email}")
        self.email = email


class RoomNotFoundException(ResourceNotFoundException):
    """部屋番号に該当する客室がカタログに存在しない場合"""

    def __init__(self, room_number: str) -> None:
        super().__init__(f"Room not found: {room_number}")
        self.room_number = room_number
