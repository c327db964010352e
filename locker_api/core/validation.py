"""
요청 데이터 검증 계층.

모든 라우트가 공유하는 선언적 규칙을 정의합니다. 요청 스키마는 아래의
Annotated 타입(Email, Password, NonBlankText, Latitude, Longitude ...)을
필드 타입으로 사용하고, 검증 실패는 첫 번째 오류 하나만
FieldError(field, rule, message) 로 변환되어 400 응답이 됩니다.

규칙 종류:
- pydantic 기본 규칙 (missing, int_type, string_type, greater_than_equal ...)
  → _TEMPLATES 의 한국어 메시지로 변환
- 이 모듈의 사용자 정의 규칙 (email_*, password_*, blank, range, exact_keys ...)
  → 규칙에서 만든 메시지를 그대로 사용
"""
import re
from typing import Annotated, Any, Dict, Iterable, Sequence, Type, TypeVar

from pydantic import AfterValidator, BaseModel, Field, StrictStr, ValidationError, ValidationInfo
from pydantic_core import PydanticCustomError

from locker_api.core.exceptions import ValidationException


ModelT = TypeVar("ModelT", bound=BaseModel)

# 이메일에 허용되지 않는 특수문자 (@ 와 . 은 허용)
EMAIL_SPECIAL_CHARACTERS = re.compile(r"[{}\[\]/?,;:|)*~`!^\-+<>#$%&\\=('\"]")
WHITESPACE = re.compile(r"\s")
STARTS_WITH_ALNUM = re.compile(r"^[0-9a-zA-Z]")
EMAIL_DOMAIN = re.compile(r"^([0-9a-zA-Z_-]+)(\.[0-9a-zA-Z_-]+){1,5}$")

PASSWORD_LENGTH_MIN = 8
PASSWORD_LENGTH_MAX = 15


class FieldError(BaseModel):
    """검증에 실패한 첫 번째 필드."""

    field: str
    rule: str
    message: str


# pydantic 기본 오류 타입별 메시지
_TEMPLATES: Dict[str, str] = {
    "missing": "{field} 값을 입력해주세요.",
    "int_type": "{field} 값은 숫자로 입력해주세요.",
    "int_parsing": "{field} 값은 숫자로 입력해주세요.",
    "int_from_float": "{field} 값은 정수로 입력해주세요.",
    "float_type": "{field} 는 숫자로 입력해주세요.",
    "float_parsing": "{field} 는 숫자로 입력해주세요.",
    "string_type": "{field} 는 문자로 입력해주세요.",
    "string_too_short": "{field} 는 {limit}자 이상 입력해주세요.",
    "string_too_long": "{field} 는 {limit}자 이하로 입력해주세요.",
    "greater_than": "{field} 값은 {limit} 보다 커야 합니다.",
    "greater_than_equal": "{field} 값은 {limit} 이상이어야 합니다.",
    "less_than": "{field} 값은 {limit} 보다 작아야 합니다.",
    "less_than_equal": "{field} 값은 {limit} 이하여야 합니다.",
    "list_type": "{field} 는 배열로 입력해주세요.",
    "too_short": "{field} 에 최소 {limit}개의 값을 입력해주세요.",
    "dict_type": "입력한 데이터의 속성은 objects 이여야 합니다.",
    "model_type": "입력한 데이터의 속성은 objects 이여야 합니다.",
    "model_attributes_type": "입력한 데이터의 속성은 objects 이여야 합니다.",
    "extra_forbidden": "{field} 는 허용되지 않는 값입니다.",
    "datetime_type": "{field} 는 날짜 형식으로 입력해주세요.",
    "datetime_parsing": "{field} 는 날짜 형식으로 입력해주세요.",
    "datetime_from_date_parsing": "{field} 는 날짜 형식으로 입력해주세요.",
    "json_invalid": "요청 본문이 올바른 JSON 형식이 아닙니다.",
}
_DEFAULT_TEMPLATE = "{field} 값을 다시 확인해주세요."

# 이 모듈에서 정의한 규칙. 메시지가 이미 한국어로 작성되어 있음
CUSTOM_RULES = frozenset({
    "email_special_character",
    "email_whitespace",
    "email_start",
    "email_domain",
    "password_length",
    "password_whitespace",
    "blank",
    "range",
    "object_type",
    "empty_object",
    "exact_keys",
    "date_order",
})

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _field_name(loc: Sequence[Any]) -> str:
    names = [part for part in loc if isinstance(part, str) and part not in _LOCATION_PREFIXES]
    if names:
        return names[-1]
    return "요청 데이터"


def to_field_error(error: Dict[str, Any]) -> FieldError:
    """
    pydantic 오류 하나를 FieldError 로 변환.

    Args:
        error: ValidationError.errors() / RequestValidationError.errors() 의 항목

    Returns:
        필드, 규칙, 한국어 메시지
    """
    rule = error.get("type", "value_error")
    field = _field_name(error.get("loc", ()))

    if rule in CUSTOM_RULES:
        return FieldError(field=field, rule=rule, message=error.get("msg", ""))

    ctx = error.get("ctx") or {}
    limit = next(
        (ctx[key] for key in ("ge", "gt", "le", "lt", "min_length", "max_length") if key in ctx),
        "",
    )
    template = _TEMPLATES.get(rule, _DEFAULT_TEMPLATE)
    return FieldError(field=field, rule=rule, message=template.format(field=field, limit=limit))


def first_field_error(errors: Iterable[Dict[str, Any]]) -> FieldError:
    """여러 오류 중 첫 번째만 사용."""
    for error in errors:
        return to_field_error(error)
    return FieldError(field="요청 데이터", rule="invalid", message="요청 데이터를 다시 확인해주세요.")


def validate_payload(model: Type[ModelT], data: Any) -> ModelT:
    """
    라우트에서 직접 받은 데이터를 스키마로 검증.

    Raises:
        ValidationException: 첫 번째로 실패한 규칙
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ValidationException(first_field_error(exc.errors()))


# ================================================================
# 필드 규칙
# ================================================================

def check_email_shape(value: str) -> str:
    """이메일 형식: 특수문자, 공백, 시작 문자, 도메인 순으로 검사."""
    if EMAIL_SPECIAL_CHARACTERS.search(value):
        raise PydanticCustomError("email_special_character", "입력하신 이메일에 특수문자가 있습니다.")
    if WHITESPACE.search(value):
        raise PydanticCustomError("email_whitespace", "입력하신 이메일에 공백이 있습니다.")
    if not STARTS_WITH_ALNUM.match(value):
        raise PydanticCustomError("email_start", "이메일의 시작은 숫자나 영어로 되어야 합니다.")
    parts = value.split("@")
    if len(parts) < 2 or not EMAIL_DOMAIN.match(parts[1]):
        raise PydanticCustomError("email_domain", "입력한 이메일의 도메인 부분을 다시 확인 해주세요.")
    return value


def check_password(value: str) -> str:
    """비밀번호: 8~15자, 공백 없음."""
    if len(value) < PASSWORD_LENGTH_MIN or len(value) > PASSWORD_LENGTH_MAX:
        raise PydanticCustomError(
            "password_length",
            "비밀번호는 {min}자리이상 {max}이하여야 합니다.",
            {"min": PASSWORD_LENGTH_MIN, "max": PASSWORD_LENGTH_MAX},
        )
    if WHITESPACE.search(value):
        raise PydanticCustomError("password_whitespace", "비밀번호에 공백이 있습니다.")
    return value


def check_not_blank(value: str, info: ValidationInfo) -> str:
    """공백만으로 이루어진 문자열 거부."""
    if value.replace(" ", "").strip() == "":
        raise PydanticCustomError("blank", "{field} 는 빈공간일 수 없습니다.", {"field": info.field_name})
    return value


def open_range(low: float, high: float) -> AfterValidator:
    """low < value < high (양 끝 제외)."""

    def check(value: float, info: ValidationInfo) -> float:
        if not (low < value < high):
            raise PydanticCustomError(
                "range",
                "{field} 는 {low} 에서 {high} 사이의 값을 입력해주세요.",
                {"field": info.field_name, "low": low, "high": high},
            )
        return value

    return AfterValidator(check)


def check_exact_keys(data: Any, required: Iterable[str]) -> Any:
    """
    객체 형태와 키 집합이 정확히 일치하는지 검사.
    model_validator(mode="before") 에서 사용합니다.
    """
    if not isinstance(data, dict):
        raise PydanticCustomError("object_type", "입력한 데이터의 속성은 objects 이여야 합니다.")
    if not data:
        raise PydanticCustomError("empty_object", "입력한 데이터가 비어 있습니다.")
    if set(data.keys()) != set(required):
        raise PydanticCustomError("exact_keys", "data의 key 값이 잘 못되었습니다.")
    return data


# ================================================================
# 공유 필드 타입
# ================================================================

Email = Annotated[StrictStr, Field(max_length=255), AfterValidator(check_email_shape)]
Password = Annotated[StrictStr, AfterValidator(check_password)]
NonBlankText = Annotated[StrictStr, AfterValidator(check_not_blank)]
StrictId = Annotated[int, Field(strict=True, ge=1)]
Latitude = Annotated[float, Field(strict=True), open_range(-90, 90)]
Longitude = Annotated[float, Field(strict=True), open_range(-180, 180)]
