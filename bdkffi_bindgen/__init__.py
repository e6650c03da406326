"""Generate bdk-ffi language bindings with uniffi-bindgen."""

__version__ = "0.1.0"
