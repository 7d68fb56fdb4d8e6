from svoz import create_app
from config import Config

app = create_app()

if __name__ == '__main__':
    # The reloader would start a second scheduler
    app.run(host='0.0.0.0', port=Config.PORT, use_reloader=False)
