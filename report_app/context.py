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

"""Deployment root lookups and request forwarding.

The deployment root is the directory the web application's resources are
unpacked into. Resource paths such as ``/WEB-INF/junit/junit.xml`` are
relative to it.
"""

import logging
import mimetypes
import os

from flask import Request, current_app
from werkzeug.exceptions import NotFound
from werkzeug.security import safe_join

log = logging.getLogger(__name__)

# pages that are rendered server side elsewhere are plain html here
PAGE_TYPES = {
    '.jsp': 'text/html',
    '.html': 'text/html',
}


def get_real_path(path, root=None):
    if root is None:
        root = current_app.config['DEPLOYMENT_ROOT']
    real_path = safe_join(root, path.lstrip('/'))
    if real_path is None:
        raise NotFound('{} is outside of the deployment root'.format(path))
    return os.path.abspath(real_path)


class RequestDispatcher(object):
    def __init__(self, path, root=None):
        self.path = path
        self._root = root

    def forward(self, request, response):
        real_path = get_real_path(self.path, self._root)
        if not os.path.isfile(real_path):
            log.info("Forward target {} not found".format(real_path))
            raise NotFound()
        with open(real_path, 'rb') as f:
            response.set_data(f.read())
        response.mimetype = self.get_mimetype()

    def get_mimetype(self):
        ext = os.path.splitext(self.path)[1].lower()
        if ext in PAGE_TYPES:
            return PAGE_TYPES[ext]
        mimetype, _ = mimetypes.guess_type(self.path)
        return mimetype or 'application/octet-stream'


class WebAppRequest(Request):
    """Request class that can hand itself on to another resource."""

    def get_request_dispatcher(self, path):
        return RequestDispatcher(path)
