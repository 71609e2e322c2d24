#!/usr/bin/env python3
"""
Lookup Tables - Static vocabulary used by skill, location and education matching.

All tables are built once at import time and exposed read-only
(MappingProxyType / frozenset / tuple). Skill entries are stored in their
normalized form, i.e. the output of normalize_skill().
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple


def _freeze_groups(groups: Dict[str, Iterable[str]]) -> Mapping[str, FrozenSet[str]]:
    return MappingProxyType({name: frozenset(members) for name, members in groups.items()})


def _invert_groups(groups: Mapping[str, FrozenSet[str]]) -> Mapping[str, FrozenSet[str]]:
    """Map every member to the names of all groups it belongs to."""
    index: Dict[str, set] = {}
    for name, members in groups.items():
        for member in members:
            index.setdefault(member, set()).add(name)
    return MappingProxyType({member: frozenset(names) for member, names in index.items()})


# ----------------------------
# Skills
# ----------------------------

# Tokens that lose their meaning once punctuation is stripped.
SYMBOL_TOKENS: Mapping[str, str] = MappingProxyType({
    'c++': ' cplusplus ',
    'c#': ' csharp ',
    'f#': ' fsharp ',
    '.net': ' dotnet ',
})

# Word-level abbreviation expansion.
ABBREVIATIONS: Mapping[str, str] = MappingProxyType({
    'js': 'javascript',
    'ts': 'typescript',
    'py': 'python',
    'cpp': 'cplusplus',
    'node': 'nodejs',
    'reactjs': 'react',
    'angularjs': 'angular',
    'vuejs': 'vue',
    'nextjs': 'next',
    'mongo': 'mongodb',
    'postgres': 'postgresql',
    'psql': 'postgresql',
    'k8s': 'kubernetes',
    'golang': 'go',
    'restful': 'rest',
    'springboot': 'spring',
    'ml': 'machine learning',
    'dl': 'deep learning',
    'nlp': 'natural language processing',
    'scrum': 'agile',
    'kanban': 'agile',
    'html5': 'html',
    'css3': 'css',
    'es6': 'javascript',
    'ecmascript': 'javascript',
})

# Whole-token variants collapsed to one canonical skill after abbreviation expansion.
_SKILL_VARIANTS: Dict[str, Tuple[str, ...]] = {
    'javascript': ('java script', 'vanilla javascript'),
    'typescript': ('type script',),
    'csharp': ('c sharp',),
    'cplusplus': ('c plus plus',),
    'dotnet': ('dot net', 'dotnet core', 'asp dotnet'),
    'nodejs': ('node javascript', 'nodejs javascript'),
    'react': ('react javascript', 'react framework'),
    'angular': ('angular javascript',),
    'vue': ('vue javascript',),
    'express': ('express javascript', 'expressjs'),
    'spring': ('spring boot', 'spring framework', 'spring mvc'),
    'mongodb': ('mongo db', 'mongodb atlas'),
    'postgresql': ('postgre sql', 'postgresql sql'),
    'mysql': ('my sql',),
    'html': ('hypertext markup language',),
    'css': ('cascading style sheets',),
    'aws': ('amazon web services',),
    'gcp': ('google cloud platform', 'google cloud'),
    'azure': ('microsoft azure',),
    'kubernetes': ('kuber netes',),
    'rest': ('rest api', 'rest apis', 'rest services'),
    'api': ('application programming interface',),
    'ui': ('user interface',),
    'ux': ('user experience',),
    'frontend': ('front end', 'client side'),
    'backend': ('back end', 'server side'),
    'fullstack': ('full stack', 'mern', 'mean'),
    'devops': ('development operations', 'dev ops'),
}

SKILL_VARIANTS: Mapping[str, str] = MappingProxyType({
    variant: canonical
    for canonical, variants in _SKILL_VARIANTS.items()
    for variant in variants
})

# Distinct canonical skills that are interchangeable for matching purposes.
SYNONYM_GROUPS: Tuple[FrozenSet[str], ...] = tuple(frozenset(group) for group in (
    ('javascript', 'ecmascript'),
    ('java', 'java programming', 'core java', 'j2ee', 'java ee'),
    ('kubernetes', 'openshift', 'eks', 'aks', 'gke'),
    ('docker', 'containerization', 'containers', 'podman'),
    ('git', 'version control', 'github', 'gitlab', 'bitbucket'),
    ('jenkins', 'ci cd', 'continuous integration', 'github actions', 'gitlab ci'),
    ('rest', 'api development', 'web services'),
    ('agile', 'methodology', 'sprint planning'),
    ('machine learning', 'deep learning', 'artificial intelligence'),
    ('sql', 'plsql', 'tsql'),
    ('hibernate', 'jpa'),
    ('aws', 'ec2', 's3', 'lambda'),
))

SYNONYM_INDEX: Mapping[str, FrozenSet[int]] = MappingProxyType({
    member: frozenset(i for i, group in enumerate(SYNONYM_GROUPS) if member in group)
    for group in SYNONYM_GROUPS
    for member in group
})

SKILL_CATEGORIES = _freeze_groups({
    'frontend': ('react', 'angular', 'vue', 'javascript', 'typescript', 'html', 'css',
                 'sass', 'bootstrap', 'tailwind', 'next'),
    'backend': ('nodejs', 'python', 'java', 'csharp', 'php', 'ruby', 'go', 'spring',
                'django', 'flask', 'express', 'fastapi', 'dotnet'),
    'database': ('mongodb', 'postgresql', 'mysql', 'redis', 'elasticsearch', 'oracle',
                 'sql server', 'sql', 'cassandra', 'dynamodb'),
    'cloud': ('aws', 'azure', 'gcp', 'heroku', 'digitalocean', 'docker', 'kubernetes'),
    'tools': ('git', 'jenkins', 'webpack', 'babel', 'eslint', 'prettier', 'npm', 'yarn',
              'maven', 'gradle'),
    'testing': ('jest', 'mocha', 'cypress', 'selenium', 'junit', 'testng', 'pytest'),
    'mobile': ('react native', 'flutter', 'ionic', 'swift', 'kotlin', 'android', 'ios'),
})

CATEGORY_INDEX = _invert_groups(SKILL_CATEGORIES)

TECHNOLOGY_FAMILIES = _freeze_groups({
    'jvm': ('java', 'kotlin', 'scala', 'groovy', 'spring', 'hibernate', 'maven', 'gradle'),
    'microsoft': ('csharp', 'dotnet', 'sql server', 'azure'),
    'javascript': ('javascript', 'typescript', 'nodejs', 'react', 'angular', 'vue', 'express'),
    'python': ('python', 'django', 'flask', 'fastapi', 'pandas', 'numpy', 'tensorflow'),
    'mobile': ('android', 'ios', 'swift', 'kotlin', 'react native', 'flutter'),
})

FAMILY_INDEX = _invert_groups(TECHNOLOGY_FAMILIES)


# ----------------------------
# Locations
# ----------------------------

DEFAULT_COUNTRY = 'India'

# Keys are lowercase word sequences; values are (city, state, country).
GAZETTEER: Mapping[str, Tuple[str, str, str]] = MappingProxyType({
    'delhi': ('Delhi', 'Delhi', 'India'),
    'new delhi': ('Delhi', 'Delhi', 'India'),
    'noida': ('Noida', 'Uttar Pradesh', 'India'),
    'greater noida': ('Greater Noida', 'Uttar Pradesh', 'India'),
    'ghaziabad': ('Ghaziabad', 'Uttar Pradesh', 'India'),
    'lucknow': ('Lucknow', 'Uttar Pradesh', 'India'),
    'gurgaon': ('Gurgaon', 'Haryana', 'India'),
    'gurugram': ('Gurgaon', 'Haryana', 'India'),
    'faridabad': ('Faridabad', 'Haryana', 'India'),
    'chandigarh': ('Chandigarh', 'Chandigarh', 'India'),
    'mumbai': ('Mumbai', 'Maharashtra', 'India'),
    'bombay': ('Mumbai', 'Maharashtra', 'India'),
    'navi mumbai': ('Navi Mumbai', 'Maharashtra', 'India'),
    'thane': ('Thane', 'Maharashtra', 'India'),
    'pune': ('Pune', 'Maharashtra', 'India'),
    'nagpur': ('Nagpur', 'Maharashtra', 'India'),
    'bangalore': ('Bangalore', 'Karnataka', 'India'),
    'bengaluru': ('Bangalore', 'Karnataka', 'India'),
    'mysore': ('Mysore', 'Karnataka', 'India'),
    'mysuru': ('Mysore', 'Karnataka', 'India'),
    'chennai': ('Chennai', 'Tamil Nadu', 'India'),
    'madras': ('Chennai', 'Tamil Nadu', 'India'),
    'coimbatore': ('Coimbatore', 'Tamil Nadu', 'India'),
    'hyderabad': ('Hyderabad', 'Telangana', 'India'),
    'secunderabad': ('Secunderabad', 'Telangana', 'India'),
    'kolkata': ('Kolkata', 'West Bengal', 'India'),
    'calcutta': ('Kolkata', 'West Bengal', 'India'),
    'howrah': ('Howrah', 'West Bengal', 'India'),
    'ahmedabad': ('Ahmedabad', 'Gujarat', 'India'),
    'surat': ('Surat', 'Gujarat', 'India'),
    'vadodara': ('Vadodara', 'Gujarat', 'India'),
    'jaipur': ('Jaipur', 'Rajasthan', 'India'),
    'indore': ('Indore', 'Madhya Pradesh', 'India'),
    'kochi': ('Kochi', 'Kerala', 'India'),
    'thiruvananthapuram': ('Thiruvananthapuram', 'Kerala', 'India'),
    'bhubaneswar': ('Bhubaneswar', 'Odisha', 'India'),
})

# Metro clusters keyed by display name; members are normalized city names.
METRO_AREAS = _freeze_groups({
    'Delhi-NCR': ('delhi', 'noida', 'greaternoida', 'gurgaon', 'ghaziabad', 'faridabad'),
    'Mumbai': ('mumbai', 'thane', 'navimumbai'),
    'Pune': ('pune',),
    'Bangalore': ('bangalore',),
    'Chennai': ('chennai',),
    'Hyderabad': ('hyderabad', 'secunderabad'),
    'Kolkata': ('kolkata', 'howrah'),
})

METRO_INDEX = _invert_groups(METRO_AREAS)

# Approximate travel time in hours between normalized city names.
TRAVEL_HOURS: Mapping[FrozenSet[str], float] = MappingProxyType({
    frozenset(pair): hours for pair, hours in (
        (('delhi', 'noida'), 1.0),
        (('delhi', 'gurgaon'), 1.0),
        (('noida', 'gurgaon'), 1.5),
        (('delhi', 'jaipur'), 5.0),
        (('gurgaon', 'jaipur'), 4.0),
        (('delhi', 'chandigarh'), 5.0),
        (('mumbai', 'pune'), 3.0),
        (('mumbai', 'ahmedabad'), 7.0),
        (('bangalore', 'chennai'), 6.0),
        (('bangalore', 'hyderabad'), 8.0),
        (('chennai', 'coimbatore'), 7.0),
        (('kolkata', 'bhubaneswar'), 7.0),
    )
})


# ----------------------------
# Education
# ----------------------------

# Members are degree names reduced to lowercase letters (see education scorer).
DEGREE_FAMILIES = _freeze_groups({
    'bachelor': ('bachelor', 'bachelors', 'btech', 'be', 'bsc', 'bcom', 'ba', 'bca', 'bba',
                 'bacheloroftechnology', 'bachelorofengineering', 'bachelorofscience',
                 'bachelorofarts', 'bachelorofcommerce', 'undergraduate', 'graduate'),
    'master': ('master', 'masters', 'mtech', 'me', 'msc', 'mcom', 'ma', 'mba', 'mca', 'ms',
               'masteroftechnology', 'masterofengineering', 'masterofscience',
               'masterofbusinessadministration', 'postgraduate'),
    'phd': ('phd', 'doctorate', 'doctorofphilosophy', 'dphil'),
    'diploma': ('diploma', 'diplomainengineering', 'polytechnic'),
})

DEGREE_FAMILY_INDEX = _invert_groups(DEGREE_FAMILIES)
