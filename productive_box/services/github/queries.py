"""GraphQL documents for the three reads a run needs."""

VIEWER_QUERY = """
query {
  viewer {
    login
    id
  }
}
"""

CONTRIBUTED_REPOS_QUERY = """
query($login: String!, $limit: Int!) {
  user(login: $login) {
    repositoriesContributedTo(last: $limit, includeUserRepositories: true) {
      nodes {
        name
        isFork
        owner {
          login
        }
      }
    }
  }
}
"""

COMMITTED_DATES_QUERY = """
query($owner: String!, $name: String!, $authorId: ID!, $limit: Int!) {
  repository(owner: $owner, name: $name) {
    defaultBranchRef {
      target {
        ... on Commit {
          history(first: $limit, author: { id: $authorId }) {
            edges {
              node {
                committedDate
              }
            }
          }
        }
      }
    }
  }
}
"""
