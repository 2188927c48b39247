"""Flask application entry point."""

import os
from flightfinder import create_app

# Create Flask application
app = create_app()

if __name__ == "__main__":
    # Run the development server
    app.run(
        debug=app.config.get('DEBUG', False),
        host=os.environ.get('HOST', '0.0.0.0'),
        port=int(os.environ.get('PORT', '5000')),
    )
