from flask import Flask, jsonify, Response
from flask_smorest import Api
from flask_cors import CORS

from avalanche_mancala.api.routes import bp
from avalanche_mancala.io.settings import board_options, configure_logging

SWAGGER_CSS = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui.css"
SWAGGER_BUNDLE = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui-bundle.js"
SWAGGER_STANDALONE = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui-standalone-preset.js"

DEV_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
]

def create_app(**overrides):
    configure_logging()
    app = Flask(__name__)

    app.config["API_TITLE"] = "Avalanche Mancala"
    app.config["API_VERSION"] = "v1"
    app.config["OPENAPI_VERSION"] = "3.0.3"
    app.config["BOARD_OPTIONS"] = board_options()
    app.config.update(overrides)

    api = Api(app)
    api.register_blueprint(bp)

    CORS(app, resources={r"/api/*": {"origins": DEV_ORIGINS}})

    # --- Manual docs: /openapi.json + /apidocs --------------------------------
    @app.get("/openapi.json")
    def openapi_json():
        return jsonify(api.spec.to_dict())

    @app.get("/apidocs")
    def apidocs():
        html = f"""
<!doctype html>
<html>
  <head>
    <meta charset="utf-8"/>
    <title>Avalanche Mancala API Docs</title>
    <link rel="stylesheet" href="{SWAGGER_CSS}">
    <style>body {{ margin:0; background:#fafafa; }}</style>
  </head>
  <body>
    <div id="swagger-ui"></div>
    <script src="{SWAGGER_BUNDLE}"></script>
    <script src="{SWAGGER_STANDALONE}"></script>
    <script>
      window.onload = () => {{
        SwaggerUIBundle({{
          url: "/openapi.json",
          dom_id: "#swagger-ui",
          presets: [SwaggerUIBundle.presets.apis, SwaggerUIStandalonePreset],
          layout: "StandaloneLayout"
        }});
      }};
    </script>
  </body>
</html>"""
        return Response(html, mimetype="text/html")
    # --------------------------------------------------------------------------

    return app

if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8000, debug=True)
