import logging

from src.dayflow.dayflow.main import create_app

app = create_app()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"])
