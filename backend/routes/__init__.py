from . import actuator, hello


def register_routes(app):
    app.register_blueprint(hello.bp)
    app.register_blueprint(actuator.bp)
