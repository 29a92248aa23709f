"""create user, income, expense and savings_goal tables

Revision ID: 5c1e2f7a9b10
Revises:
Create Date: 2026-10-16 10:12:40.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5c1e2f7a9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# SQLAlchemy stores enum member names
currency_enum = sa.Enum('USD', 'EUR', 'LKR', name='currency')
category_enum = sa.Enum(
    'food', 'rent', 'utilities', 'transportation', 'entertainment',
    'shopping', 'health', 'education', 'other',
    name='expensecategory',
)

def upgrade() -> None:
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('currency', currency_enum, nullable=False),
        sa.Column('is_premium', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_user_email', 'user', ['email'], unique=True)

    op.create_table(
        'income',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('currency', currency_enum, nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_income_user_id', 'income', ['user_id'], unique=True)

    op.create_table(
        'expense',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('category', category_enum, nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('currency', currency_enum, nullable=False),
        sa.Column('note', sa.String(), nullable=True),
    )
    op.create_index('ix_expense_user_id', 'expense', ['user_id'])
    op.create_index('ix_expense_date', 'expense', ['date'])

    op.create_table(
        'savings_goal',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('target_amount', sa.Float(), nullable=False),
        sa.Column('deadline', sa.Date(), nullable=False),
        sa.Column('currency', currency_enum, nullable=False),
    )
    op.create_index('ix_savings_goal_user_id', 'savings_goal', ['user_id'], unique=True)

def downgrade() -> None:
    op.drop_index('ix_savings_goal_user_id', table_name='savings_goal')
    op.drop_table('savings_goal')
    op.drop_index('ix_expense_date', table_name='expense')
    op.drop_index('ix_expense_user_id', table_name='expense')
    op.drop_table('expense')
    op.drop_index('ix_income_user_id', table_name='income')
    op.drop_table('income')
    op.drop_index('ix_user_email', table_name='user')
    op.drop_table('user')
    category_enum.drop(op.get_bind(), checkfirst=True)
    currency_enum.drop(op.get_bind(), checkfirst=True)
