"""REST service for teachers and courses backed by a SQL database."""