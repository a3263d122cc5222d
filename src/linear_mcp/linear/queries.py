"""GraphQL documents sent to the Linear API."""

LIST_TEAMS = """
query ListTeams($first: Int!) {
  teams(first: $first) {
    nodes {
      id
      name
      key
      description
    }
  }
}
"""

GET_TEAM = """
query GetTeam($id: String!) {
  team(id: $id) {
    id
    name
    key
    description
  }
}
"""

LIST_WORKFLOW_STATES = """
query ListWorkflowStates($teamId: ID!, $first: Int!) {
  workflowStates(first: $first, filter: { team: { id: { eq: $teamId } } }) {
    nodes {
      id
      name
      type
      position
    }
  }
}
"""

LIST_USERS = """
query ListUsers($first: Int!) {
  users(first: $first) {
    nodes {
      id
      name
      displayName
      email
      active
    }
  }
}
"""

CREATE_ISSUE = """
mutation CreateIssue($input: IssueCreateInput!) {
  issueCreate(input: $input) {
    success
    issue {
      id
      identifier
      title
      description
      priority
      url
      team { id }
    }
  }
}
"""
