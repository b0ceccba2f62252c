from typing import Annotated

from fastapi import Depends

from mailcheck.services.email_validation import BaseEmailValidator, get_email_validator

# Type aliases for dependency injection
EmailValidator = Annotated[BaseEmailValidator, Depends(get_email_validator)]
