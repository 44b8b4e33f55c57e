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

import os
import sys
import logging
import urllib3
import requests
from robot.api.deco import keyword
from robot.libraries.BuiltIn import BuiltIn

urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
log = logging.getLogger()
log.setLevel(logging.DEBUG)

REPORT_NOT_FOUND = '<error>junit.xml not found</error>\n'
CONSOLE_FORMAT = '%(asctime)s - %(thread)d - %(name)s:%(funcName)s#%(lineno)d - %(levelname)s - %(message)s'


class reportLibrary(object):
    def __init__(self, service_url=None, ssl_mode='disable'):
        self._ssl_mode = ssl_mode
        self._scheme = 'http'
        if self._ssl_mode == 'require':
            self._scheme = 'https'
        if not service_url:
            service_url = os.getenv("REPORT_SERVICE_URL",
                                    "{}://junit-report:5000".format(self._scheme))
        self._service_url = service_url.rstrip('/')

    def _replace_root_handler(self, handler):
        log = logging.getLogger()
        log.setLevel(logging.INFO)
        handler.setLevel(logging.INFO)
        for h in list(log.handlers):
            log.removeHandler(h)
        log.addHandler(handler)

    def setup_console_logging(self):
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self._replace_root_handler(ch)

    def setup_robot_logging(self):
        from robot.api import logger

        class RobotRedirectHandler(logging.StreamHandler):
            def emit(self, record):
                try:
                    logger.info(self.format(record))
                except (KeyboardInterrupt, SystemExit):
                    raise
                except Exception:
                    self.handleError(record)
        ch = RobotRedirectHandler()
        ch.setFormatter(logging.Formatter('%(name)s:%(funcName)s#%(lineno)d - %(levelname)s - %(message)s'))
        self._replace_root_handler(ch)

    def setup_logging(self, log_to_robot=False):
        if log_to_robot:
            self.setup_robot_logging()
        else:
            self.setup_console_logging()

    def get(self, path):
        url = "{}/{}".format(self._service_url, path.lstrip('/'))
        response = requests.get(url, verify=False, timeout=30)
        logging.info("GET {0} -> {1}".format(url, response.status_code))
        return response

    @keyword('Get Report')
    def get_report(self):
        response = self.get('/junit.xml')
        if response.status_code != 200:
            BuiltIn().run_keyword('Fail', "Report request failed with {}".format(response.status_code))
        return response

    @keyword('Report Should Be Xml')
    def report_should_be_xml(self, response=None):
        if response is None:
            response = self.get_report()
        content_type = response.headers.get('Content-Type', '')
        logging.info("Content-Type: {}".format(content_type))
        if content_type.split(';')[0].strip() != 'text/xml':
            BuiltIn().run_keyword('Fail', "Unexpected content type {}".format(content_type))

    @keyword('Report Should Equal File')
    def report_should_equal_file(self, file_name, encoding='utf-8'):
        with open(file_name, 'r', encoding=encoding) as f:
            expected = ''.join(line.rstrip('\n') + '\n' for line in f)
        # served as utf-8 whatever the file's encoding
        body = self.get_report().text
        if body != expected:
            logging.info("Expected:\n{0}\nActual:\n{1}".format(expected, body))
            BuiltIn().run_keyword('Fail', "Report differs from {}".format(file_name))

    @keyword('Report Should Be Missing')
    def report_should_be_missing(self):
        body = self.get_report().text
        if body != REPORT_NOT_FOUND:
            BuiltIn().run_keyword('Fail', "Report is present: {}".format(body[:200]))

    @keyword('Index Page Should Be Served')
    def index_page_should_be_served(self, expected_text=None):
        response = self.get('/')
        if response.status_code != 200:
            BuiltIn().run_keyword('Fail', "Index page request failed with {}".format(response.status_code))
        if expected_text and expected_text not in response.text:
            BuiltIn().run_keyword('Fail', "'{}' not found in index page".format(expected_text))
        return response.text
