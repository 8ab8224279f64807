"""NVP wire codec, response model, errors and transports."""

__all__: list[str] = []
