"""Static dashboard data: navigation tree, pages and DOM selectors."""
