# custom exception 정의 및 관리


class TransitSegmentException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class UnknownLineException(TransitSegmentException):
    def __init__(self, line_id: str):
        self.line_id = line_id
        super().__init__(f"존재하지 않는 노선({line_id})", code="UNKNOWN_LINE")


class UnknownStationException(TransitSegmentException):
    def __init__(self, start_name: str, end_name: str):
        self.start_name = start_name
        self.end_name = end_name
        super().__init__(
            f"역을 찾을 수 없음 ({start_name} or {end_name})",
            code="UNKNOWN_STATION",
        )


class InsufficientTokensException(TransitSegmentException):
    def __init__(self, count: int, minimum: int = 2):
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"최소 {minimum}개의 역이 필요합니다 (입력: {count}개)",
            code="INSUFFICIENT_TOKENS",
        )


class DataSourceException(TransitSegmentException):
    def __init__(self, message: str = "노선 데이터를 불러올 수 없습니다"):
        super().__init__(message, code="DATA_SOURCE_ERROR")
