"""``python -m wren.demo`` — serve the demo on the configured host and port."""

from wren.demo.app import main

if __name__ == "__main__":
    main()
