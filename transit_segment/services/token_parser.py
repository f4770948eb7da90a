from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class StationToken:
    name: str
    line_id: str = ""  # 노선 정보 없음 (마지막 역인 경우 등)

    @property
    def has_line(self) -> bool:
        return bool(self.line_id)


def parse_token(token: str) -> Tuple[str, str]:
    """
    "계양역(arex)" -> ("계양역", "arex"), "노량진역" -> ("노량진역", "")

    '('와 ')'가 순서대로 모두 있을 때만 노선으로 인식하고,
    그 외(괄호 하나만 있거나 ')'가 먼저 나오는 경우)는 전체를 역 이름으로 사용
    """
    open_paren = token.find("(")
    close_paren = token.find(")")

    if open_paren != -1 and close_paren != -1 and open_paren < close_paren:
        return token[:open_paren], token[open_paren + 1 : close_paren]
    return token, ""


def parse_station_token(token: str) -> StationToken:
    name, line_id = parse_token(token)
    return StationToken(name=name, line_id=line_id)
