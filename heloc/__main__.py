#setup: pip install -e ".[test]"
#setup: python -m heloc        (or: flask --app heloc.app:create_app run --debug)

from heloc.app import create_app
from heloc.config import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
