# fixup/chat_main.py
from fixup.api.app import create_app

app = create_app("fixup-chat")


@app.get("/")
def root():
    return {"message": "Hello World"}


@app.get("/health")
def health():
    return {"status": "healthy"}
