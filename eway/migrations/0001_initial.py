from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='OrderTransaction',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('order_number', models.CharField(db_index=True, max_length=128)),
                ('method', models.CharField(max_length=32)),
                ('amount', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('managed_customer_id', models.CharField(blank=True, db_index=True, max_length=128, null=True)),
                ('invoice_reference', models.CharField(blank=True, max_length=128, null=True)),
                ('trxn_number', models.CharField(blank=True, max_length=128, null=True)),
                ('auth_code', models.CharField(blank=True, max_length=128, null=True)),
                ('accepted', models.BooleanField(default=False)),
                ('reason', models.CharField(blank=True, max_length=255)),
                ('request_xml', models.TextField()),
                ('response_xml', models.TextField()),
                ('date_created', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ('-date_created',),
            },
        ),
    ]
