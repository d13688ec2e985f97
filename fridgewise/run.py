import os

from fridgewise import create_app
from fridgewise.config.settings import config

# Create the Flask application
app = create_app(config[os.getenv("FLASK_ENV", "default")])

if __name__ == "__main__":
    port = int(os.getenv("PORT", "8080"))
    app.run(host="0.0.0.0", port=port, debug=False, use_reloader=False)
