from pydantic import BaseModel, ConfigDict, Field

EMAIL_ADDRESS_DESCRIPTION = "The email address to be validated"
EMAIL_ADDRESS_EXAMPLE = "user@example.com"


class ValidationRequest(BaseModel):
    """Request body for email validation."""

    model_config = ConfigDict(populate_by_name=True)

    email_address: str = Field(
        alias="emailAddress",
        description=EMAIL_ADDRESS_DESCRIPTION,
        examples=[EMAIL_ADDRESS_EXAMPLE],
    )
