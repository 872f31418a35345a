import os

from lifelink import create_app

app = create_app()

# Ensure the app runs only if this script is executed directly
if __name__ == '__main__':
    app.run(host='0.0.0.0', port=int(os.getenv('PORT', 5000)), debug=os.getenv('FLASK_DEBUG') == '1')
