from arcade import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Use the SocketIO server so /ws live updates work in dev
    socketio.run(app, host='0.0.0.0', port=app.config['PORT'], debug=True)
