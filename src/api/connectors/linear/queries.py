"""Documentos GraphQL da API Linear.

Relações (state, assignee, team, labels) são selecionadas na mesma query
para que cada registro volte completamente resolvido.
"""

ISSUE_FIELDS = """
  id
  identifier
  title
  description
  priority
  url
  createdAt
  updatedAt
  state { id name type }
  assignee { id name email }
  team { id key name }
  labels { nodes { id name color } }
"""

PROJECT_FIELDS = """
  id
  name
  description
  state
  progress
  targetDate
  url
"""

TEAM_FIELDS = """
  id
  key
  name
  description
  states { nodes { id name type color position } }
"""

USER_FIELDS = """
  id
  name
  email
  displayName
  avatarUrl
  admin
"""

CYCLE_FIELDS = """
  id
  name
  number
  startsAt
  endsAt
  progress
  issueCountHistory
"""

LABEL_FIELDS = """
  id
  name
  color
  description
"""

LIST_ISSUES = f"""
query ListIssues($filter: IssueFilter, $first: Int) {{
  issues(filter: $filter, first: $first) {{ nodes {{ {ISSUE_FIELDS} }} }}
}}
"""

SEARCH_ISSUES = f"""
query SearchIssues($term: String!, $first: Int) {{
  searchIssues(term: $term, first: $first) {{ nodes {{ {ISSUE_FIELDS} }} }}
}}
"""

# issue(id:) aceita UUID ou identificador (ENG-123)
GET_ISSUE = f"""
query GetIssue($id: String!) {{
  issue(id: $id) {{ {ISSUE_FIELDS} }}
}}
"""

CREATE_ISSUE = """
mutation CreateIssue($input: IssueCreateInput!) {
  issueCreate(input: $input) { success issue { id identifier url } }
}
"""

UPDATE_ISSUE = """
mutation UpdateIssue($id: String!, $input: IssueUpdateInput!) {
  issueUpdate(id: $id, input: $input) { success issue { id identifier } }
}
"""

ARCHIVE_ISSUE = """
mutation ArchiveIssue($id: String!) {
  issueArchive(id: $id) { success }
}
"""

ADD_ISSUE_LABEL = """
mutation AddIssueLabel($id: String!, $labelId: String!) {
  issueAddLabel(id: $id, labelId: $labelId) { success }
}
"""

LIST_PROJECTS = f"""
query ListProjects($first: Int) {{
  projects(first: $first) {{ nodes {{ {PROJECT_FIELDS} }} }}
}}
"""

GET_PROJECT = f"""
query GetProject($id: String!) {{
  project(id: $id) {{ {PROJECT_FIELDS} }}
}}
"""

CREATE_PROJECT_UPDATE = """
mutation CreateProjectUpdate($input: ProjectUpdateCreateInput!) {
  projectUpdateCreate(input: $input) { success projectUpdate { id } }
}
"""

LIST_TEAMS = f"""
query ListTeams {{
  teams {{ nodes {{ {TEAM_FIELDS} }} }}
}}
"""

GET_TEAM = f"""
query GetTeam($id: String!) {{
  team(id: $id) {{ {TEAM_FIELDS} }}
}}
"""

LIST_COMMENTS = """
query ListComments($id: String!) {
  issue(id: $id) {
    comments { nodes { id body createdAt user { id name } } }
  }
}
"""

CREATE_COMMENT = """
mutation CreateComment($input: CommentCreateInput!) {
  commentCreate(input: $input) { success comment { id } }
}
"""

VIEWER = f"""
query Viewer {{
  viewer {{ {USER_FIELDS} }}
}}
"""

LIST_USERS = f"""
query ListUsers {{
  users {{ nodes {{ {USER_FIELDS} }} }}
}}
"""

LIST_TEAM_MEMBERS = f"""
query ListTeamMembers($id: String!) {{
  team(id: $id) {{ members {{ nodes {{ {USER_FIELDS} }} }} }}
}}
"""

LIST_TEAM_CYCLES = f"""
query ListTeamCycles($id: String!) {{
  team(id: $id) {{ cycles {{ nodes {{ {CYCLE_FIELDS} }} }} }}
}}
"""

GET_CYCLE = f"""
query GetCycle($id: String!) {{
  cycle(id: $id) {{ {CYCLE_FIELDS} }}
}}
"""

LIST_LABELS = f"""
query ListLabels {{
  issueLabels {{ nodes {{ {LABEL_FIELDS} }} }}
}}
"""

LIST_TEAM_LABELS = f"""
query ListTeamLabels($id: String!) {{
  team(id: $id) {{ labels {{ nodes {{ {LABEL_FIELDS} }} }} }}
}}
"""
