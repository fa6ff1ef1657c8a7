"""Root entrypoint shim for the openapi-shapes CLI."""

from openapi_shapes import main

if __name__ == "__main__":
    main()
