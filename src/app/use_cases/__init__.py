"""
Use Cases

Organized into domain folders:
- properties/: Properties, CSV import/export, title movements
- units/: Units (spaces)
- tenants/: Tenants and CSV import
- leases/: Leases and payments
- taxes/: Property and unit taxes
- utilities/: Property utilities
- maintenance/: Maintenance requests
- documents/: Document records
- projects/: Kanban projects, members, boards, columns
- tasks/: Kanban tasks and their comments, attachments, labels
- notifications/: In-app notifications
- audit/: Audit log listing
- reports/: Financial and operational reports
- search/: Global search
- users/: User listing

Import from subdirectories.
"""
