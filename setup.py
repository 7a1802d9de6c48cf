'''
Packaging for sitemapitem. The package has a single runtime dependency, used
for parsing the free-form dates accepted in item documents.
'''
from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).parent

# Get version
version = {}
with (here / "sitemapitem" / "version.py").open() as f:
    exec(f.read(), version)

setup(
    name='sitemapitem',
    version=version['__version__'],
    description='Validate and render sitemap <url> entries with image, '
        'video, news, mobile and hreflang extensions',
    author='Mark E. Haase',
    author_email='mhaase@hyperiongray.com',
    python_requires=">=3.7",
    keywords='sitemap xml seo',
    packages=find_packages(exclude=['docs', 'tests']),
    install_requires=[
        'python-dateutil',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['sitemapitem=sitemapitem.__main__:main'],
    },
)
