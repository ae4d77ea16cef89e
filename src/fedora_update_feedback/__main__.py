from fedora_update_feedback.cli import app

app()
