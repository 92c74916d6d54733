"""Reference schema cases declared with pydantic.

Each case maps a fixture name to a callable that emits the raw pydantic JSON
schema for it. Scalar cases are expressed as a single annotated field; object
and union cases are plain ``BaseModel`` classes.
"""

from functools import partial
from typing import Annotated, Any, Callable, Literal, Optional
from uuid import UUID

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, create_model

Email = Annotated[str, Field(json_schema_extra={"format": "email"})]


def field_schema(annotation: Any, **field_kwargs: Any) -> dict[str, Any]:
    """
    JSON schema for one annotated field, as pydantic emits it inside a model.

    Args:
        annotation (Any): Field type, e.g. ``str | None``.
        **field_kwargs: Passed to ``Field`` (constraints, default, description).

    Returns:
        dict[str, Any]: The field schema, carrying the model's ``$defs`` if any.
    """
    model = create_model("ReferenceValue", value=(annotation, Field(**field_kwargs)))
    root = model.model_json_schema()
    schema = dict(root["properties"]["value"])
    schema.pop("title", None)
    if "$defs" in root:
        schema["$defs"] = root["$defs"]
    return schema


def model_schema(model: type[BaseModel]) -> dict[str, Any]:
    return model.model_json_schema()


class Item(BaseModel):
    id: int
    name: str


class Empty(BaseModel):
    pass


class SimpleUser(BaseModel):
    name: str
    age: int


class RequiredFields(BaseModel):
    id: int
    email: Email
    isActive: bool = True


class OptionalFields(BaseModel):
    name: str
    nickname: str | None = None
    age: int | None = None


class Contact(BaseModel):
    name: str
    email: Email


class Settings(BaseModel):
    theme: str = "light"
    notifications: bool = True


class Nested(BaseModel):
    user: Contact
    settings: Settings


class WithArray(BaseModel):
    title: str
    tags: list[str]
    ratings: list[Annotated[int, Field(ge=1, le=5)]]


class Passthrough(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str


class Comprehensive(BaseModel):
    """A comprehensive user object"""

    id: Annotated[int, Field(gt=0)]
    email: Annotated[Email, Field(min_length=5, max_length=100)]
    name: Annotated[str, Field(min_length=2, max_length=50)]
    age: Annotated[int, Field(ge=0, le=120)] | None
    tags: list[str] | None
    isActive: bool = True
    metadata: Any = None


class TextBlock(BaseModel):
    type: Literal["text"]
    content: str


class NumberBlock(BaseModel):
    type: Literal["number"]
    value: int


class UserAccount(BaseModel):
    type: Literal["user"]
    name: str
    email: str


class AdminAccount(BaseModel):
    type: Literal["admin"]
    name: str
    role: str


class CardPayment(BaseModel):
    paymentMethod: Literal["card"]
    cardNumber: Annotated[str, Field(min_length=16, max_length=16)]
    cvv: Annotated[str, Field(min_length=3, max_length=4)]
    expiryDate: str


class BankPayment(BaseModel):
    paymentMethod: Literal["bank"]
    accountNumber: str
    routingNumber: str


class CryptoPayment(BaseModel):
    paymentMethod: Literal["crypto"]
    wallet: str
    currency: str


class ClickEvent(BaseModel):
    eventType: Literal["click"]
    x: int
    y: int


class ScrollEvent(BaseModel):
    eventType: Literal["scroll"]
    delta: int


class TreeNode(BaseModel):
    label: str
    children: list["TreeNode"] = Field(default_factory=list)


Role = Literal["admin", "user", "guest"]
Status = Literal["active", "inactive", "pending"]
Account = Annotated[UserAccount | AdminAccount, Field(discriminator="type")]
Payment = Annotated[
    CardPayment | BankPayment | CryptoPayment, Field(discriminator="paymentMethod")
]
Event = Annotated[ClickEvent | ScrollEvent, Field(discriminator="eventType")]

REFERENCE_CASES: dict[str, Callable[[], dict[str, Any]]] = {
    # String
    "string-basic": partial(field_schema, str),
    "string-nullable": partial(field_schema, str | None),
    "string-with-default": partial(field_schema, str, default="default-value"),
    "string-with-description": partial(
        field_schema, str, description="A descriptive string field"
    ),
    "string-minlength": partial(field_schema, str, min_length=5),
    "string-maxlength": partial(field_schema, str, max_length=50),
    "string-length-range": partial(field_schema, str, min_length=3, max_length=20),
    "string-email": partial(field_schema, Email),
    "string-url": partial(field_schema, AnyUrl),
    "string-uuid": partial(field_schema, UUID),
    "string-pattern": partial(field_schema, str, pattern=r"^[A-Z][a-z]+"),
    "string-literal": partial(field_schema, Literal["exact-value"]),
    "string-nullable-with-default": partial(
        field_schema, str | None, default="fallback"
    ),
    "string-email-required": partial(
        field_schema, Email, min_length=5, max_length=100
    ),
    # Integer
    "integer-basic": partial(field_schema, int),
    "integer-nullable": partial(field_schema, int | None),
    "integer-with-default": partial(field_schema, int, default=42),
    "integer-with-description": partial(
        field_schema, int, description="A numeric integer field"
    ),
    "integer-min": partial(field_schema, int, ge=0),
    "integer-max": partial(field_schema, int, le=100),
    "integer-range": partial(field_schema, int, ge=1, le=10),
    "integer-positive": partial(field_schema, int, gt=0),
    "integer-negative": partial(field_schema, int, lt=0),
    "integer-nonnegative": partial(field_schema, int, ge=0),
    "integer-nonpositive": partial(field_schema, int, le=0),
    "integer-age-example": partial(field_schema, int, ge=0, le=120, default=0),
    # Double
    "double-basic": partial(field_schema, float),
    "double-nullable": partial(field_schema, float | None),
    "double-with-default": partial(field_schema, float, default=3.14),
    "double-min": partial(field_schema, float, ge=0.0),
    "double-max": partial(field_schema, float, le=100.0),
    "double-range": partial(field_schema, float, ge=0.0, le=1.0),
    "double-positive": partial(field_schema, float, gt=0.0),
    "double-finite": partial(field_schema, float, allow_inf_nan=False),
    "double-price-example": partial(
        field_schema, float, ge=0.01, le=999999.99, default=0.01
    ),
    # Boolean
    "boolean-basic": partial(field_schema, bool),
    "boolean-nullable": partial(field_schema, bool | None),
    "boolean-with-default-true": partial(field_schema, bool, default=True),
    "boolean-with-default-false": partial(field_schema, bool, default=False),
    "boolean-with-description": partial(
        field_schema, bool, description="A flag indicating status"
    ),
    # Any
    "any-basic": partial(field_schema, Any),
    "any-nullable": partial(field_schema, Optional[Any]),
    "any-with-default": partial(field_schema, Any, default="default-any-value"),
    "any-with-description": partial(
        field_schema, Any, description="Accepts any value type"
    ),
    # List
    "list-of-strings": partial(field_schema, list[str]),
    "list-of-integers": partial(field_schema, list[int]),
    "list-nullable": partial(field_schema, list[str] | None),
    "list-with-description": partial(
        field_schema, list[str], description="A list of string values"
    ),
    "list-minlength": partial(field_schema, list[str], min_length=1),
    "list-maxlength": partial(field_schema, list[str], max_length=10),
    "list-length-range": partial(field_schema, list[int], min_length=2, max_length=5),
    "list-of-emails": partial(field_schema, list[Email]),
    "list-of-objects": partial(field_schema, list[Item]),
    # Object
    "object-basic": partial(model_schema, Empty),
    "object-nullable": partial(field_schema, Empty | None),
    "object-with-description": partial(
        field_schema, Empty, description="An object with properties"
    ),
    "object-simple-user": partial(model_schema, SimpleUser),
    "object-required-fields": partial(model_schema, RequiredFields),
    "object-optional-fields": partial(model_schema, OptionalFields),
    "object-nested": partial(model_schema, Nested),
    "object-with-array": partial(model_schema, WithArray),
    "object-additional-properties-allowed": partial(model_schema, Passthrough),
    "object-comprehensive": partial(model_schema, Comprehensive),
    "object-recursive": partial(model_schema, TreeNode),
    # Unions
    "anyof-string-or-integer": partial(field_schema, str | int),
    "anyof-nullable": partial(field_schema, str | int | None),
    "anyof-with-description": partial(
        field_schema, str | bool, description="Either a string or boolean value"
    ),
    "anyof-multiple-types": partial(field_schema, str | int | bool | list[str]),
    "anyof-objects": partial(field_schema, TextBlock | NumberBlock),
    # Discriminated unions
    "discriminated-basic": partial(field_schema, Account),
    "discriminated-nullable": partial(field_schema, Account | None),
    "discriminated-with-description": partial(
        field_schema, Event, description="A discriminated event union"
    ),
    "discriminated-complex": partial(field_schema, Payment),
    # Enums
    "enum-user-role": partial(field_schema, Role),
    "enum-status": partial(field_schema, Status),
    "enum-nullable": partial(field_schema, Role | None),
    "enum-with-default": partial(field_schema, Role, default="user"),
    "enum-with-description": partial(
        field_schema, Status, description="Status of the entity"
    ),
}
