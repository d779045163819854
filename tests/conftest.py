"""
Common test fixtures and configurations for pytest.

This module provides reusable fixtures for testing the dpkg parser: sample
stanzas taken from real dpkg status files, and mock objects for the ambient
pieces (logger) so that the parsing logic can be tested on its own.
"""

from unittest.mock import MagicMock

import pytest

from core.logger import Logger


@pytest.fixture
def mock_logger():
    """Mock logger for testing."""
    return MagicMock(spec=Logger)


@pytest.fixture
def libssl_package():
    """A single stanza from a dpkg status file, with a folded description."""
    return """Package: libssl1.0.0
Status: install ok installed
Multi-Arch: same
Priority: important
Section: libs
Installed-Size: 2836
Maintainer: Ubuntu Developers <ubuntu-devel-discuss@lists.ubuntu.com>
Architecture: amd64
Source: openssl
Version: 1.0.1-4ubuntu5.5
Depends: libc6 (>= 2.14), zlib1g (>= 1:1.1.4), debconf (>= 0.5) | debconf-2.0
Pre-Depends: multiarch-support
Breaks: openssh-client (<< 1:5.9p1-4), openssh-server (<< 1:5.9p1-4)
Description: SSL shared libraries
    libssl and libcrypto shared libraries needed by programs like
    apache-ssl, telnet-ssl and openssh.
    .
    It is part of the OpenSSL implementation of SSL.
Original-Maintainer: Debian OpenSSL Team <pkg-openssl-devel@lists.alioth.debian.org>"""


@pytest.fixture
def status_file():
    """Three stanzas from a dpkg status file."""
    return """Package: libws-commons-util-java
Status: install ok installed
Priority: optional
Section: java
Installed-Size: 101
Maintainer: Ubuntu Developers <ubuntu-devel-discuss@lists.ubuntu.com>
Architecture: all
Version: 1.0.1-7
Description: Common utilities from the Apache Web Services Project
    This is a small collection of utility classes, that allow high
    performance XML processing based on SAX.
Original-Maintainer: Debian Java Maintainers <pkg-java-maintainers@lists.alioth.debian.org>
Homepage: http://ws.apache.org/commons/util/

Package: python-pkg-resources
Status: install ok installed
Priority: optional
Section: python
Installed-Size: 175
Maintainer: Ubuntu Developers <ubuntu-devel-discuss@lists.ubuntu.com>
Architecture: all
Source: distribute
Version: 0.6.24-1ubuntu1
Replaces: python2.3-setuptools, python2.4-setuptools
Provides: python2.6-setuptools, python2.7-setuptools
Depends: python (>= 2.6), python (<< 2.8)
Suggests: python-distribute, python-distribute-doc
Conflicts: python-setuptools (<< 0.6c8-3), python2.3-setuptools (<< 0.6b2), python2.4-setuptools (<< 0.6b2)
Description: Package Discovery and Resource Access using pkg_resources
    The pkg_resources module provides an API for Python libraries to
    access their resource files, and for extensible applications and
    frameworks to automatically discover plugins.
Original-Maintainer: Matthias Klose <doko@debian.org>
Homepage: http://packages.python.org/distribute
Python-Version: 2.6, 2.7

Package: tcpd
Status: install ok installed
Multi-Arch: foreign
Priority: optional
Section: net
Installed-Size: 132
Maintainer: Ubuntu Developers <ubuntu-devel-discuss@lists.ubuntu.com>
Architecture: amd64
Source: tcp-wrappers
Version: 7.6.q-21
Replaces: libwrap0 (<< 7.6-8)
Depends: libc6 (>= 2.4), libwrap0 (>= 7.6-4~)
Description: Wietse Venema's TCP wrapper utilities
    Wietse Venema's network logger, also known as TCPD or LOG_TCP.
    .
    These programs log the client host name of incoming telnet,
    ftp, rsh, rlogin, finger etc. requests.
Original-Maintainer: Marco d'Itri <md@linux.it>"""
