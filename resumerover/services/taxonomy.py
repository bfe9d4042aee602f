"""
ResumeRover - Skill taxonomy and stop words.

Read-only reference data shared by every analysis. Categories map to the
terms an ATS would look for; terms are written the way people type them
and are normalized through the tokenizer when the taxonomy is loaded.

Bump TAXONOMY_VERSION whenever a term list changes so stored analyses can be
traced back to the reference data that produced them.
"""
from types import MappingProxyType

TAXONOMY_VERSION = "2024.1"

# Display label for each category, in report order
CATEGORY_LABELS = MappingProxyType({
    'languages': 'Programming Languages',
    'frontend': 'Frontend',
    'backend': 'Backend & APIs',
    'databases': 'Databases',
    'cloud': 'Cloud Platforms',
    'devops': 'DevOps & Infrastructure',
    'data_science': 'Data & Machine Learning',
    'mobile': 'Mobile',
    'testing': 'Testing & QA',
    'security': 'Security',
    'tools': 'Tools & Methodologies',
    'business': 'Business & Operations',
    'soft_skills': 'Soft Skills',
})

SKILL_TERMS = MappingProxyType({
    'languages': (
        'python', 'javascript', 'typescript', 'java', 'c++', 'c#', 'go', 'golang',
        'rust', 'ruby', 'php', 'swift', 'kotlin', 'scala', 'r', 'matlab',
        'perl', 'haskell', 'elixir', 'clojure', 'dart', 'lua', 'groovy',
        'objective-c', 'julia', 'cobol', 'fortran', 'sql', 'bash',
    ),
    'frontend': (
        'react', 'reactjs', 'vue', 'vuejs', 'angular', 'angularjs', 'svelte',
        'html', 'html5', 'css', 'css3', 'sass', 'scss', 'tailwind',
        'tailwindcss', 'bootstrap', 'jquery', 'webpack', 'vite',
        'nextjs', 'next.js', 'nuxt', 'gatsby', 'redux', 'mobx',
        'storybook', 'figma', 'responsive design', 'accessibility',
        'web components', 'webgl', 'three.js', 'd3', 'd3.js',
    ),
    'backend': (
        'node', 'nodejs', 'node.js', 'express', 'fastapi', 'django', 'flask',
        'spring', 'spring boot', 'rails', 'ruby on rails', '.net', 'asp.net',
        'laravel', 'nestjs', 'graphql', 'rest', 'restful', 'api', 'apis',
        'microservices', 'grpc', 'websocket', 'rabbitmq', 'kafka', 'celery',
        'oauth', 'jwt',
    ),
    'databases': (
        'postgresql', 'postgres', 'mysql', 'mariadb', 'sqlite',
        'mongodb', 'redis', 'elasticsearch', 'dynamodb', 'cassandra',
        'neo4j', 'oracle', 'sql server', 'mssql', 'firebase', 'firestore',
        'supabase', 'prisma', 'sqlalchemy', 'snowflake', 'bigquery',
        'clickhouse', 'nosql',
    ),
    'cloud': (
        'aws', 'amazon web services', 'azure', 'gcp', 'google cloud',
        'heroku', 'vercel', 'netlify', 'cloudflare', 'digital ocean',
        'ec2', 's3', 'lambda', 'cloudfront', 'rds', 'ecs', 'eks', 'fargate',
        'api gateway', 'sqs', 'sns', 'kinesis', 'serverless',
    ),
    'devops': (
        'docker', 'kubernetes', 'k8s', 'terraform', 'ansible', 'puppet',
        'chef', 'helm', 'jenkins', 'github actions', 'gitlab ci', 'circleci',
        'ci/cd', 'continuous integration', 'continuous deployment',
        'prometheus', 'grafana', 'datadog', 'splunk', 'elk', 'cloudwatch',
        'nginx', 'apache', 'linux', 'unix', 'devops', 'infrastructure as code',
    ),
    'data_science': (
        'machine learning', 'deep learning', 'neural networks',
        'tensorflow', 'pytorch', 'keras', 'scikit-learn', 'sklearn',
        'pandas', 'numpy', 'scipy', 'matplotlib', 'jupyter', 'databricks',
        'spark', 'pyspark', 'hadoop', 'airflow', 'mlflow', 'dbt',
        'tableau', 'power bi', 'looker', 'nlp', 'natural language processing',
        'computer vision', 'llm', 'data analysis', 'data visualization',
        'statistics', 'etl', 'data pipelines',
    ),
    'mobile': (
        'ios', 'android', 'react native', 'flutter', 'xamarin', 'swiftui',
        'jetpack compose', 'ionic', 'mobile development',
    ),
    'testing': (
        'unit testing', 'integration testing', 'e2e testing', 'tdd',
        'test-driven development', 'bdd', 'jest', 'mocha', 'pytest',
        'junit', 'selenium', 'cypress', 'playwright', 'qa', 'test automation',
        'load testing',
    ),
    'security': (
        'security', 'cybersecurity', 'owasp', 'penetration testing',
        'encryption', 'ssl', 'tls', 'saml', 'sso', 'iam', 'rbac',
        'soc2', 'gdpr', 'hipaa', 'compliance',
    ),
    'tools': (
        'git', 'github', 'gitlab', 'bitbucket', 'jira', 'confluence',
        'agile', 'scrum', 'kanban', 'postman', 'swagger', 'openapi',
        'excel', 'salesforce', 'sap',
    ),
    'business': (
        'project management', 'product management', 'budgeting', 'forecasting',
        'stakeholder management', 'requirements gathering', 'business analysis',
        'customer service', 'sales', 'marketing', 'seo', 'crm', 'operations',
        'reporting', 'vendor management', 'risk management',
    ),
    'soft_skills': (
        'leadership', 'mentoring', 'coaching', 'communication', 'collaboration',
        'teamwork', 'problem solving', 'critical thinking', 'analytical',
        'presentation', 'documentation', 'technical writing', 'cross-functional',
        'time management', 'adaptability', 'attention to detail', 'negotiation',
    ),
})

STOP_WORDS = frozenset({
    # articles, conjunctions, prepositions
    'a', 'an', 'the', 'and', 'or', 'but', 'nor', 'so', 'yet', 'if', 'then',
    'in', 'on', 'at', 'to', 'for', 'of', 'with', 'by', 'from', 'as', 'into',
    'onto', 'about', 'over', 'under', 'within', 'without', 'across', 'through',
    'via', 'per', 'up', 'out', 'off', 'than', 'like', 'among', 'between',
    # auxiliaries and modals
    'is', 'was', 'are', 'were', 'be', 'been', 'being', 'am',
    'have', 'has', 'had', 'having', 'do', 'does', 'did', 'doing',
    'will', 'would', 'could', 'should', 'may', 'might', 'must', 'shall', 'can',
    # pronouns and determiners
    'i', 'me', 'my', 'we', 'us', 'our', 'ours', 'you', 'your', 'yours',
    'he', 'him', 'his', 'she', 'her', 'they', 'them', 'their', 'it', 'its',
    'this', 'that', 'these', 'those', 'who', 'whom', 'whose', 'which', 'what',
    'where', 'when', 'why', 'how', 'all', 'any', 'each', 'every', 'both',
    'few', 'more', 'most', 'other', 'some', 'such', 'no', 'not', 'only',
    'own', 'same', 'too', 'very', 'just', 'also', 'well', 'etc', 'e.g', 'i.e',
    # job posting filler
    'ability', 'able', 'experience', 'experienced', 'years', 'year',
    'required', 'requires', 'require', 'requirements', 'preferred', 'plus',
    'including', 'include', 'includes', 'strong', 'excellent', 'good',
    'great', 'knowledge', 'understanding', 'familiarity', 'familiar',
    'skills', 'skill', 'skilled', 'proficient', 'proficiency', 'working',
    'work', 'role', 'position', 'candidate', 'candidates', 'looking',
    'join', 'team', 'opportunity', 'responsibilities', 'qualifications',
    'using', 'use', 'related', 'relevant', 'new', 'ideal',
    'seeking', 'minimum', 'least', 'degree', 'equivalent',
})


def iter_skill_terms():
    """Yield (category, term) pairs in taxonomy order."""
    for category, terms in SKILL_TERMS.items():
        for term in terms:
            yield category, term


# Seniority and generic role words: they name the posting, not a requirement,
# so they never become keywords on their own
TITLE_FILLER = frozenset({
    'senior', 'sr', 'junior', 'jr', 'lead', 'principal', 'staff', 'chief',
    'head', 'associate', 'intern', 'trainee', 'entry', 'mid', 'level',
    'engineer', 'engineers', 'developer', 'developers', 'programmer',
    'programmers', 'specialist', 'specialists', 'consultant', 'professional',
})
