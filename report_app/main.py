# Copyright 2024-2025 NetCracker Technology Corporation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import os
import sys

from flask import Blueprint, Flask, Response, current_app, request
from flask.views import MethodView

from report_app.context import WebAppRequest, get_real_path

log = logging.getLogger(__name__)

# written by the test run that packages the application
REPORT_PATH = '/WEB-INF/junit/junit.xml'
REPORT_NOT_FOUND = '<error>junit.xml not found</error>\n'

bp = Blueprint('report', __name__)


# junit.xml is copied line by line, every line ends with '\n'
@bp.route('/junit.xml')
def junit_report():
    report_file = get_real_path(REPORT_PATH)

    if os.path.exists(report_file):
        with open(report_file, 'r', encoding=current_app.config['REPORT_ENCODING']) as f:
            data = ''.join(line.rstrip('\n') + '\n' for line in f)
        log.debug("Served {}".format(report_file))
    else:
        log.warning("Report {} not found".format(report_file))
        data = REPORT_NOT_FOUND

    return Response(data, mimetype='text/xml')


class IndexView(MethodView):
    """Hands GET / over to the static index page."""

    page = '/index.jsp'

    def get(self):
        response = current_app.response_class()
        self.handle_get(request, response)
        return response

    def handle_get(self, request, response):
        dispatcher = request.get_request_dispatcher(self.page)
        dispatcher.forward(request, response)


bp.add_url_rule('/', view_func=IndexView.as_view('index'))


def load_config():
    return {
        'DEPLOYMENT_ROOT': os.getenv('DEPLOYMENT_ROOT', '/app'),
        'REPORT_ENCODING': os.getenv('REPORT_ENCODING', 'utf-8'),
        'HOST': os.getenv('HOST', '0.0.0.0'),
        'PORT': int(os.getenv('PORT', 5000)),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO'),
    }


def create_app(config=None):
    app = Flask(__name__)
    app.request_class = WebAppRequest
    app.config.update(load_config())
    if config:
        app.config.update(config)
    app.register_blueprint(bp)
    return app


def setup_console_logging(level='INFO'):
    log = logging.getLogger()
    log.setLevel(level)

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    formatter = logging \
        .Formatter('%(asctime)s - %(thread)d - %(name)s:%(funcName)s#%(lineno)d - %(levelname)s - %(message)s')
    ch.setFormatter(formatter)
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.addHandler(ch)


app = create_app()


def main():
    setup_console_logging(app.config['LOG_LEVEL'])
    log.info("Serving {} on port {}".format(app.config['DEPLOYMENT_ROOT'], app.config['PORT']))
    app.run(host=app.config['HOST'], port=app.config['PORT'])


if __name__ == '__main__':
    main()
