from .serial_port import open_serial_port

__all__ = ["open_serial_port"]
