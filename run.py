from werkzeug.serving import run_simple

from daftlog import create_app

app = create_app({
    "SOURCES": ["daftlog.routes.demo:demo"],
    "ERROR_RENDERERS": {"html": []},
})

if __name__ == "__main__":
    run_simple("127.0.0.1", 5000, app)
