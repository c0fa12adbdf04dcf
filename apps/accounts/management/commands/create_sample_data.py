"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 4 users (admin, alice, bob, charlie)
- 1 team (Snack Squad) led by alice, bob as fund manager, charlie as food manager
- Rules and rule violations
- Snacks with contributions
- Expenses, payments and a bank account
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from decimal import Decimal
from datetime import date, timedelta

from apps.accounts.models import User
from apps.funds.models import BankAccount, Expense, Payment
from apps.funds.services import add_bank_account, add_expense, add_payment
from apps.rules.models import Rule, RuleViolation
from apps.rules.services import add_rule, add_violation
from apps.snacks.models import Snack
from apps.snacks.services import add_snack
from apps.teams.models import Team, TeamMembership
from apps.teams.services import add_team_member, assign_roles, create_team

TEAM_NAME = 'Snack Squad'
SAMPLE_EMAILS = ['alice@example.com', 'bob@example.com', 'charlie@example.com']


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing sample data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        if Team.objects.filter(name=TEAM_NAME).exists():
            self.stdout.write(self.style.WARNING(
                f'Team "{TEAM_NAME}" already exists, use --clear to recreate it.'
            ))
            return

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        team = self.create_team(users)
        self.create_rules(team, users)
        self.create_snacks(team, users)
        self.create_funds(team, users)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  alice@example.com / password123 (team lead)')
        self.stdout.write('  bob@example.com / password123 (fund manager)')
        self.stdout.write('  charlie@example.com / password123 (food manager)')

    def clear_data(self):
        """Remove the sample team, its records and the sample users."""
        teams = Team.objects.filter(name=TEAM_NAME)
        RuleViolation.objects.filter(team__in=teams).delete()
        Rule.objects.filter(team__in=teams).delete()
        Snack.objects.filter(team__in=teams).delete()
        Expense.objects.filter(team__in=teams).delete()
        Payment.objects.filter(team__in=teams).delete()
        BankAccount.objects.filter(team__in=teams).delete()
        TeamMembership.objects.filter(team__in=teams).delete()
        teams.delete()
        User.objects.filter(email__in=SAMPLE_EMAILS).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'full_name': 'Admin User',
                'phone': '+1 555 010 0000',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        users = {'admin': admin}
        profiles = [
            ('alice', 'Alice Lead', '+1 555 010 0001', date(1988, 4, 12)),
            ('bob', 'Bob Treasurer', '+1 555 010 0002', date(1991, 9, 3)),
            ('charlie', 'Charlie Cook', '+1 555 010 0003', date(1995, 1, 27)),
        ]
        for key, full_name, phone, birthday in profiles:
            user, _ = User.objects.get_or_create(
                email=f'{key}@example.com',
                defaults={
                    'full_name': full_name,
                    'phone': phone,
                    'date_of_birth': birthday,
                }
            )
            user.set_password('password123')
            user.save()
            users[key] = user

        return users

    def create_team(self, users):
        """Create the team and hand out roles."""
        self.stdout.write('  Creating team...')

        alice = users['alice']
        team = create_team(
            name=TEAM_NAME,
            created_by=alice,
            description='Shared snacks for the third floor',
        )
        for key in ('bob', 'charlie'):
            add_team_member(team_id=team.id, added_by=alice, user_id=users[key].id)

        assign_roles(
            team_id=team.id,
            member_user_id=users['bob'].id,
            requested_by=alice,
            is_fund_manager=True,
        )
        assign_roles(
            team_id=team.id,
            member_user_id=users['charlie'].id,
            requested_by=alice,
            is_food_manager=True,
        )
        return team

    def create_rules(self, team, users):
        """Create rules and a few violations, logged by the fund manager."""
        self.stdout.write('  Creating rules...')

        bob = users['bob']
        late = add_rule(
            team=team,
            user=bob,
            title='Late to standup',
            amount=Decimal('2.00'),
            description='Joining the daily standup after it started',
        )
        mugs = add_rule(
            team=team,
            user=bob,
            title='Dirty mug in the sink',
            amount=Decimal('1.00'),
        )

        add_violation(
            team=team,
            user=bob,
            violator_id=users['charlie'].id,
            rule_id=late.id,
            date=timezone.localdate() - timedelta(days=6),
        )
        add_violation(
            team=team,
            user=bob,
            violator_id=users['alice'].id,
            rule_id=mugs.id,
            additional_amount=Decimal('0.50'),
            date=timezone.localdate() - timedelta(days=2),
            note='Three mugs at once',
        )

    def create_snacks(self, team, users):
        """Create snacks bought by the food manager."""
        self.stdout.write('  Creating snacks...')

        snacks = [
            ('Samosas', Decimal('9.00'), 5, {'alice': '3.00', 'bob': '3.00', 'charlie': '3.00'}),
            ('Fruit basket', Decimal('12.50'), 3, {'alice': '5.00', 'bob': '7.50'}),
            ('Chocolate cake', Decimal('18.00'), 1, {'alice': '6.00', 'bob': '6.00', 'charlie': '6.00'}),
        ]
        for food_item, expense, days_ago, shares in snacks:
            add_snack(
                team=team,
                user=users['charlie'],
                food_item=food_item,
                expense=expense,
                date=timezone.localdate() - timedelta(days=days_ago),
                contributions=[
                    {'user_id': users[key].id, 'amount': Decimal(amount)}
                    for key, amount in shares.items()
                ],
            )

    def create_funds(self, team, users):
        """Create payments into the fund, expenses and a bank account."""
        self.stdout.write('  Creating expenses and payments...')

        bob = users['bob']
        for key in ('alice', 'bob', 'charlie'):
            add_payment(
                team=team,
                user=bob,
                amount=Decimal('20.00'),
                paid_by_id=users[key].id,
                date=timezone.localdate() - timedelta(days=7),
                note='Monthly contribution',
            )

        add_expense(
            team=team,
            user=users['charlie'],
            amount=Decimal('14.75'),
            reason='Coffee and milk',
            date=timezone.localdate() - timedelta(days=4),
        )
        add_expense(
            team=team,
            user=bob,
            amount=Decimal('6.20'),
            reason='Paper cups',
            spender_id=users['alice'].id,
        )

        add_bank_account(
            team=team,
            user=bob,
            account_user_id=bob.id,
            bank_name='City Bank',
            branch='Central',
            account_no='0001234567',
            account_title='Bob Treasurer',
            routing_number='021000021',
        )
