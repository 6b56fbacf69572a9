# Entry point for the development server: python -m hello_member.web_app
from . import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
