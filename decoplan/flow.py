#
# DecoPlan - dive decompression planning library.
#
# Copyright (C) 2013-2014 by Artur Wroblewski <wrobell@pld-linux.org>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

"""
Dive segments pipeline.

Dive segments are calculated by a generator. While the generator runs, the
segments can be passed to coroutines (mods), which validate them or save
them in a file.
"""

from functools import wraps


def coroutine(func):
    """
    Create coroutine, which is ready to receive dive segments.
    """
    @wraps(func)
    def start(*args, **kwargs):
        mod = func(*args, **kwargs)
        mod.send(None)
        return mod
    return start


def sender(segments, *mods):
    """
    Pass dive segments of a generator to coroutines.

    Each coroutine is created by a function of `mods` collection when the
    generator is started. The dive segments are received by coroutines in
    order of `mods` collection, before they are yielded by the decorated
    generator.

    :param segments: Dive segments generator function.
    :param mods: Functions creating coroutines.
    """
    @wraps(segments)
    def pipeline(*args, **kwargs):
        targets = [f() for f in mods]
        for item in segments(*args, **kwargs):
            for t in targets:
                t.send(item)
            yield item
    return pipeline


# vim: sw=4:et:ai
