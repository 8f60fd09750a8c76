WELCOME_MESSAGE = "Welcome to Spring Boot!"


def get_welcome() -> str:
    return WELCOME_MESSAGE


def get_greeting(name: str) -> str:
    """Business logic for generating a greeting.

    The name is used as given, without validation or escaping.
    """
    return f"Hello {name}!"
