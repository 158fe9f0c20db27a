from audio_reader.api.app import create_app

app = create_app()
