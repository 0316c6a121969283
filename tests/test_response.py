from quiz_api.utils.response import message_response, error_response


def test_message_response():
    assert message_response("User registered successfully!") == {"message": "User registered successfully!"}


def test_message_response_with_extra_fields():
    result = message_response("Login successful", token="abc")
    assert result == {"message": "Login successful", "token": "abc"}


def test_error_response_without_error():
    assert error_response("User not found") == {"message": "User not found"}


def test_error_response_with_error():
    result = error_response("Error registering user", "Username already exists")
    assert result == {"message": "Error registering user", "error": "Username already exists"}
