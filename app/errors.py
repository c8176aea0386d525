from fastapi import HTTPException, status


class InvalidArgumentError(HTTPException):
    def __init__(self, detail: str = "Pokémon name must not be empty."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    # Upstream misses and an unreachable upstream both surface as 404
    def __init__(self, name: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"Pokémon '{name}' not found.")


class UpstreamParseError(HTTPException):
    def __init__(self, detail: str = "PokeAPI returned an unexpected response format."):
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
