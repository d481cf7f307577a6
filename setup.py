# Copyright 2026 The Pigweed Authors
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.
"""sensirion_shdlc"""

import setuptools  # type: ignore

setuptools.setup(
    name='sensirion_shdlc',
    version='0.2.0',
    author='Pigweed Authors',
    author_email='pigweed-developers@googlegroups.com',
    description='Sensirion SHDLC frame encoder and decoder',
    packages=setuptools.find_packages(),
    package_data={'sensirion_shdlc': ['py.typed']},
    zip_safe=False,
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'sensirion-shdlc = sensirion_shdlc.__main__:main',
        ]
    },
    install_requires=[
        'coloredlogs',
        'pyyaml',
    ],
)
