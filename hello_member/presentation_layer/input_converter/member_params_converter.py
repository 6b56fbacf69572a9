from ...application_layer.input_params.register_member_params import RegisterMemberParams

class MemberParamsConverter:
    @staticmethod
    def convert_json_to_params(params) -> RegisterMemberParams:
        if params is None:
            raise MissingParameterError("Missing parameter: params")
        if not isinstance(params, dict):
            raise AttributeTypeError("Member parameters must be a dictionary")
        if "name" not in params or params["name"] is None:
            raise MissingParameterError("Missing parameter: name")
        if not isinstance(params["name"], str):
            raise AttributeTypeError("Attribute name must be a string")
        return RegisterMemberParams.of(params["name"])

class MissingParameterError(Exception):
    """
    Exception raised when a required parameter is missing.
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"MissingParameterError: {self.message}"

class AttributeTypeError(Exception):
    """
    Exception raised when a parameter has the wrong type.
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"AttributeTypeError: {self.message}"
