# Copyright (c) 2025-2026 NASK. All rights reserved.

import glob
import os.path as osp
import sys

from setuptools import setup, find_packages


setup_dir, setup_filename = osp.split(osp.abspath(__file__))
setup_human_readable_ref = osp.join(osp.basename(setup_dir), setup_filename)

def get_structify_version(filename_base):
    path_base = osp.join(setup_dir, filename_base)
    path_glob_pattern = path_base + '*'
    # The non-suffixed path variant should be
    # tried only if another one does not exist.
    matching_paths = sorted(glob.iglob(path_glob_pattern),
                            reverse=True)
    try:
        path = matching_paths[0]
    except IndexError:
        sys.exit('[{}] Cannot determine the structify version '
                 '(no files match the pattern {!a}).'
                 .format(setup_human_readable_ref,
                         path_glob_pattern))
    try:
        with open(path, encoding='ascii') as f:
            return f.read().strip()
    except (OSError, UnicodeError) as exc:
        sys.exit('[{}] Cannot determine the structify version '
                 '(an error occurred when trying to '
                 'read it from the file {!a} - {}).'
                 .format(setup_human_readable_ref,
                         path,
                         exc))


structify_version = get_structify_version('.structify-version')

requirements = []
dep_links = []
with open(osp.join(setup_dir, 'requirements'), encoding='ascii') as f:
    for raw_line in f:
        line = raw_line.strip()
        if not line or line.startswith('#'):
            continue
        req = line.split('\t')
        requirements.append(req[0])
        try:
            dep_links.append(req[1])
        except IndexError:
            pass

tests_requirements = [
    'unittest_expander>=0.4.4',
    'pytest>=7.1.2',
    'SQLAlchemy>=2.0',
]


setup(
    name="structify",
    version=structify_version,

    packages=find_packages(include=['structify', 'structify.*']),
    dependency_links=dep_links,
    install_requires=requirements,
    python_requires='>=3.9',
    include_package_data=True,
    zip_safe=False,
    tests_require=tests_requirements,
    extras_require={
        'tests': tests_requirements,
        'sqlalchemy': ['SQLAlchemy>=2.0'],
    },
    test_suite="structify.tests",

    description=('Recursive, configuration-driven conversion between '
                 'records, mappings and lists of them.'),
    maintainer='CERT Polska',
    maintainer_email='n6@cert.pl',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
    ],
    keywords='structured data conversion records dataclasses mappings',
)
