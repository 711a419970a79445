# fixup/services/errors.py


class ServiceError(Exception):
    message = "Something went wrong"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class NotFoundError(ServiceError):
    message = "Not found"


class NameTakenError(ServiceError):
    message = "This name is already taken"


class UserAlreadyExistsError(ServiceError):
    message = "User already exists"


class EmailTakenError(ServiceError):
    message = "User email is taken"


class IncorrectCredentialsError(ServiceError):
    message = "Email or Password is incorrect"


class IncorrectPasswordError(ServiceError):
    message = "Password is incorrect"


class UserAlreadyVerifiedError(ServiceError):
    message = "User is already verified"


class TokenAlreadyUsedError(ServiceError):
    message = "Token already used"
