import logging
import os

from fooddelivery import create_app

app = create_app()

if __name__ == "__main__":
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    port = int(os.environ.get("PORT", 10000))
    print(f"Starting Flask development server on http://127.0.0.1:{port}...")
    app.run(host='0.0.0.0', port=port)
