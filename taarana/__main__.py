"""Run the development server: ``python -m taarana`` or ``taarana``."""

from .app import create_app
from .config import Config, configure_logging


def main():
    config = Config.from_env()
    configure_logging(config.log_level)
    app = create_app(config)

    print("\n" + "=" * 50)
    print("  🌸 TAARANA Wellness Backend")
    print(f"  📡 API running at http://localhost:{config.port}/api")
    print(f"  🗄️  Backend: {config.backend}")
    print("=" * 50 + "\n")
    app.run(debug=config.debug, port=config.port, host=config.host)


if __name__ == "__main__":
    main()
