import setuptools

desc = ('Asynchronous Elasticsearch REST API bindings on top of the Tornado '
        'AsyncHTTPClient')

try:
    readme = open('README.rst').read()
except IOError:
    readme = ''


setuptools.setup(name='tornado_esapi',
                 version='1.0.0',
                 description=desc,
                 long_description=readme,
                 packages=setuptools.find_packages(exclude=['tests',
                                                            'tests.*']),
                 install_requires=['elasticsearch>=8', 'tornado>=6'],
                 extras_require={'test': ['pytest']},
                 python_requires='>=3.7',
                 license='BSD',
                 classifiers=['Development Status :: 4 - Beta',
                              'Intended Audience :: Developers',
                              'License :: OSI Approved :: BSD License',
                              'Operating System :: OS Independent',
                              'Programming Language :: Python :: 3',
                              'Programming Language :: Python :: Implementation :: CPython',
                              'Topic :: Communications',
                              'Topic :: Internet',
                              'Topic :: Software Development :: Libraries'],
                 zip_safe=True)
